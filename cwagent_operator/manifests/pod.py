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

import hashlib
from typing import List

from kubernetes import client

from .. import naming
from ..config import Config
from ..models import AmazonCloudWatchAgent
from .container import container
from .labels import labels
from .serviceaccount import service_account_name

CONFIG_HASH_ANNOTATION = "amazon-cloudwatch-agent-operator-config/sha256"


def volumes(cfg: Config, agent: AmazonCloudWatchAgent) -> List[client.V1Volume]:
    """Volumes backing the mounts of the agent container."""
    entry = cfg.collector_config_map_entry
    vols = [
        client.V1Volume(
            name=naming.config_map_volume(),
            config_map=client.V1ConfigMapVolumeSource(
                name=naming.config_map(agent.name),
                items=[client.V1KeyToPath(key=entry, path=entry)],
            ),
        )
    ]
    vols.extend(agent.spec.volumes)
    for cfg_map in agent.spec.config_maps:
        vols.append(
            client.V1Volume(
                name=naming.config_map_extra(cfg_map.name),
                config_map=client.V1ConfigMapVolumeSource(name=cfg_map.name),
            )
        )
    return vols


def pod_annotations(agent: AmazonCloudWatchAgent) -> dict:
    annotations = dict(agent.spec.pod_annotations)
    # a config change alters the pod template and rolls the pods
    annotations[CONFIG_HASH_ANNOTATION] = hashlib.sha256(
        agent.spec.config.encode("utf-8")
    ).hexdigest()
    return annotations


def pod_template(cfg: Config, agent: AmazonCloudWatchAgent, name: str) -> client.V1PodTemplateSpec:
    spec = agent.spec
    return client.V1PodTemplateSpec(
        metadata=client.V1ObjectMeta(
            labels=labels(agent, name),
            annotations=pod_annotations(agent),
        ),
        spec=client.V1PodSpec(
            service_account_name=service_account_name(agent),
            containers=[container(cfg, agent, add_config=True)],
            volumes=volumes(cfg, agent),
            node_selector=dict(spec.node_selector) or None,
            tolerations=list(spec.tolerations) or None,
            host_network=spec.host_network,
            priority_class_name=spec.priority_class_name,
            security_context=spec.pod_security_context,
        ),
    )
