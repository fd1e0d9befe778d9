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

from kubernetes import client

from .. import naming
from ..config import Config
from ..models import AmazonCloudWatchAgent
from .labels import object_meta, selector_labels
from .pod import pod_template


def deployment(cfg: Config, agent: AmazonCloudWatchAgent) -> client.V1Deployment:
    name = naming.deployment(agent.name)
    return client.V1Deployment(
        api_version="apps/v1",
        kind="Deployment",
        metadata=object_meta(agent, name),
        spec=client.V1DeploymentSpec(
            replicas=agent.spec.replicas if agent.spec.replicas is not None else 1,
            selector=client.V1LabelSelector(match_labels=selector_labels(agent)),
            template=pod_template(cfg, agent, name),
        ),
    )


def daemon_set(cfg: Config, agent: AmazonCloudWatchAgent) -> client.V1DaemonSet:
    name = naming.daemon_set(agent.name)
    return client.V1DaemonSet(
        api_version="apps/v1",
        kind="DaemonSet",
        metadata=object_meta(agent, name),
        spec=client.V1DaemonSetSpec(
            selector=client.V1LabelSelector(match_labels=selector_labels(agent)),
            template=pod_template(cfg, agent, name),
        ),
    )
