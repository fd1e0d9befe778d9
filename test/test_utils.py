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

import kubernetes
import pytest
from kubernetes import client

from cwagent_operator.models import AmazonCloudWatchAgent
from cwagent_operator.utils.utils import deserialize

KUBERNETES_VERSION = kubernetes.__version__


def test_deserialize_list_of_models():
    env = deserialize(
        [{"name": "X", "value": "1"}, {"name": "POD_IP", "valueFrom": {"fieldRef": {"fieldPath": "status.podIP"}}}],
        "list[V1EnvVar]",
    )

    assert all(isinstance(e, client.V1EnvVar) for e in env), KUBERNETES_VERSION
    assert env[0].value == "1"
    assert env[1].value_from.field_ref.field_path == "status.podIP"


def test_deserialize_single_model():
    resources = deserialize({"limits": {"memory": "200Mi"}}, "V1ResourceRequirements")

    assert isinstance(resources, client.V1ResourceRequirements), KUBERNETES_VERSION
    assert resources.limits == {"memory": "200Mi"}


def test_deserialize_none():
    assert deserialize(None, "V1EnvVar") is None


@pytest.mark.parametrize(
    "field,value",
    [
        ("env", [{"name": "X", "value": "1"}]),
        ("ports", [{"name": "p", "port": 80}]),
        ("volumeMounts", [{"name": "data", "mountPath": "/data"}]),
        ("resources", {"requests": {"cpu": "100m"}}),
    ],
)
def test_agent_with_core_types_parses_on_installed_client(field, value):
    agent = AmazonCloudWatchAgent.from_dict(
        {
            "metadata": {"name": "cloudwatch-agent", "namespace": "amazon-cloudwatch"},
            "spec": {field: value},
        }
    )

    assert agent.name == "cloudwatch-agent", KUBERNETES_VERSION
