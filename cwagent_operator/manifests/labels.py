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

from typing import Dict

from kubernetes import client

from .. import naming
from ..constants import constants
from ..models import AmazonCloudWatchAgent
from ..utils.utils import truncate

LAST_APPLIED_ANNOTATION = "kubectl.kubernetes.io/last-applied-configuration"


def selector_labels(agent: AmazonCloudWatchAgent) -> Dict[str, str]:
    return {
        constants.LABEL_MANAGED_BY: constants.MANAGED_BY,
        constants.LABEL_INSTANCE: naming.instance(agent.namespace, agent.name),
        constants.LABEL_PART_OF: constants.PART_OF,
        constants.LABEL_COMPONENT: constants.COMPONENT,
    }


def labels(agent: AmazonCloudWatchAgent, name: str) -> Dict[str, str]:
    """Labels of a generated object; the operator's own labels override the user's."""
    base = dict(agent.metadata.labels)
    base.update(selector_labels(agent))
    base[constants.LABEL_NAME] = truncate(name, constants.MAX_LABEL_VALUE_LEN)
    return base


def annotations(agent: AmazonCloudWatchAgent) -> Dict[str, str]:
    return {
        k: v for k, v in agent.metadata.annotations.items() if k != LAST_APPLIED_ANNOTATION
    }


def object_meta(agent: AmazonCloudWatchAgent, name: str) -> client.V1ObjectMeta:
    return client.V1ObjectMeta(
        name=name,
        namespace=agent.namespace,
        labels=labels(agent, name),
        annotations=annotations(agent),
        owner_references=[agent.owner_reference()],
    )


def label_selector(agent: AmazonCloudWatchAgent) -> str:
    """Selector string matching every object generated for agent."""
    return ",".join(f"{k}={v}" for k, v in sorted(selector_labels(agent).items()))
