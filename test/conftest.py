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

import json

import pytest
from kubernetes.client.rest import ApiException

from cwagent_operator.config import Config
from cwagent_operator.models import AmazonCloudWatchAgent


def api_error(status, reason=None, causes=None):
    err = ApiException(status=status, reason=reason)
    err.body = json.dumps(
        {
            "kind": "Status",
            "apiVersion": "v1",
            "status": "Failure",
            "reason": reason,
            "details": {"causes": causes or []},
            "code": status,
        }
    )
    return err


def namespace_terminating_error(namespace="amazon-cloudwatch"):
    return api_error(
        403,
        reason="Forbidden",
        causes=[
            {
                "reason": "NamespaceTerminating",
                "message": f"namespace {namespace} is being terminated",
                "field": "metadata.namespace",
            }
        ],
    )


def make_agent(spec=None, name="cloudwatch-agent", namespace="amazon-cloudwatch"):
    return AmazonCloudWatchAgent.from_dict(
        {
            "apiVersion": "cloudwatch.aws.amazon.com/v1alpha1",
            "kind": "AmazonCloudWatchAgent",
            "metadata": {"name": name, "namespace": namespace, "uid": "1234-abcd"},
            "spec": spec or {},
        }
    )


@pytest.fixture
def cfg():
    return Config()


@pytest.fixture
def agent():
    return make_agent({"config": '{"logs": {}}'})
