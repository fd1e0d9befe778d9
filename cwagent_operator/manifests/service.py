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

from typing import List

from kubernetes import client

from .. import naming
from ..constants import constants
from ..models import AmazonCloudWatchAgent
from .labels import object_meta, selector_labels
from .ports import container_ports


def service_ports(agent: AmazonCloudWatchAgent) -> List[client.V1ServicePort]:
    return [
        client.V1ServicePort(
            name=p.name,
            port=p.container_port,
            target_port=p.container_port,
            protocol=p.protocol,
        )
        for p in container_ports(agent.spec)
    ]


def service(agent: AmazonCloudWatchAgent) -> client.V1Service:
    spec = client.V1ServiceSpec(
        type="ClusterIP",
        selector=selector_labels(agent),
        ports=service_ports(agent),
    )
    if agent.spec.mode == constants.MODE_DAEMONSET:
        # route node-local traffic to the agent pod on the same node
        spec.internal_traffic_policy = "Local"
    return client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=object_meta(agent, naming.service(agent.name)),
        spec=spec,
    )


def headless_service(agent: AmazonCloudWatchAgent) -> client.V1Service:
    svc = service(agent)
    svc.metadata = object_meta(agent, naming.headless_service(agent.name))
    svc.spec.cluster_ip = "None"
    svc.spec.internal_traffic_policy = None
    return svc


def services(agent: AmazonCloudWatchAgent) -> List[client.V1Service]:
    """The services fronting the agent, none when it exposes no ports."""
    if not container_ports(agent.spec):
        return []
    return [service(agent), headless_service(agent)]
