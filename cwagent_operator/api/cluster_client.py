# Copyright 2024 The CloudWatch Agent Operator Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from kubernetes import client, config

from ..constants import constants
from ..models import AmazonCloudWatchAgent
from ..utils import utils


class ClusterClient(object):

    def __init__(
        self,
        config_file=None,
        config_dict=None,
        context=None,  # pylint: disable=too-many-arguments
        client_configuration=None,
        persist_config=True,
    ):
        """
        Cluster client constructor
        :param config_file: kubeconfig file, defaults to ~/.kube/config
        :param config_dict: Takes the config file as a dict.
        :param context: kubernetes context
        :param client_configuration: kubernetes configuration object
        :param persist_config:
        """
        if config_file or config_dict or not utils.is_running_in_k8s():
            if config_dict:
                config.load_kube_config_from_dict(
                    config_dict=config_dict,
                    context=context,
                    client_configuration=None,
                    persist_config=persist_config,
                )
            else:
                config.load_kube_config(
                    config_file=config_file,
                    context=context,
                    client_configuration=client_configuration,
                    persist_config=persist_config,
                )
        else:
            config.load_incluster_config()
        self.api_client = client.ApiClient()
        self.core_api = client.CoreV1Api(self.api_client)
        self.app_api = client.AppsV1Api(self.api_client)
        self.api_instance = client.CustomObjectsApi(self.api_client)

    def get_agent(self, name, namespace, **kwargs) -> AmazonCloudWatchAgent:
        """
        Get the AmazonCloudWatchAgent resource
        :param name: resource name
        :param namespace: resource namespace
        :param kwargs: passed through to the API call, e.g. _request_timeout
        :return: the parsed resource; ApiException is raised unchanged
        """
        obj = self.api_instance.get_namespaced_custom_object(
            constants.CWAGENT_GROUP,
            constants.CWAGENT_V1ALPHA1_VERSION,
            namespace,
            constants.CWAGENT_PLURAL,
            name,
            **kwargs,
        )
        return AmazonCloudWatchAgent.from_dict(obj)

    def patch_agent_status(self, name, namespace, status, **kwargs):
        """
        Patch the status subresource of the AmazonCloudWatchAgent resource
        :param name: resource name
        :param namespace: resource namespace
        :param status: status dict
        :return: patched resource
        """
        return self.api_instance.patch_namespaced_custom_object_status(
            constants.CWAGENT_GROUP,
            constants.CWAGENT_V1ALPHA1_VERSION,
            namespace,
            constants.CWAGENT_PLURAL,
            name,
            {"status": status},
            **kwargs,
        )
