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

import pytest
from kubernetes import client
from pydantic import ValidationError

from cwagent_operator.models import AmazonCloudWatchAgent


def test_from_dict_parses_kubernetes_types():
    agent = AmazonCloudWatchAgent.from_dict(
        {
            "apiVersion": "cloudwatch.aws.amazon.com/v1alpha1",
            "kind": "AmazonCloudWatchAgent",
            "metadata": {
                "name": "cloudwatch-agent",
                "namespace": "amazon-cloudwatch",
                "uid": "42",
                "resourceVersion": "7",
                "labels": {"team": "obs"},
            },
            "spec": {
                "mode": "daemonset",
                "serviceAccount": "cloudwatch-agent",
                "env": [{"name": "K8S_NODE_NAME", "valueFrom": {"fieldRef": {"fieldPath": "spec.nodeName"}}}],
                "ports": [{"name": "custom", "port": 9000}],
                "configmaps": [{"name": "extra", "mountpath": "/extra"}],
                "resources": {"requests": {"cpu": "250m"}},
                "tolerations": [{"operator": "Exists"}],
                "unknownField": "ignored",
            },
            "status": {"version": "1.0.0", "scale": {"replicas": 2}},
        }
    )

    assert agent.name == "cloudwatch-agent"
    assert agent.namespace == "amazon-cloudwatch"
    assert agent.metadata.resource_version == "7"
    assert agent.spec.mode == "daemonset"
    assert agent.spec.service_account == "cloudwatch-agent"
    assert isinstance(agent.spec.env[0], client.V1EnvVar)
    assert agent.spec.env[0].value_from.field_ref.field_path == "spec.nodeName"
    assert isinstance(agent.spec.ports[0], client.V1ServicePort)
    assert agent.spec.ports[0].port == 9000
    assert agent.spec.config_maps[0].mount_path == "/extra"
    assert agent.spec.resources.requests == {"cpu": "250m"}
    assert agent.spec.tolerations[0].operator == "Exists"
    assert agent.status.version == "1.0.0"
    assert agent.status.scale.replicas == 2


def test_defaults():
    agent = AmazonCloudWatchAgent.from_dict({"metadata": {"name": "a"}})

    assert agent.spec.mode == "deployment"
    assert agent.spec.args == {}
    assert agent.spec.env == []
    assert agent.spec.resources is None
    assert agent.api_version == "cloudwatch.aws.amazon.com/v1alpha1"


def test_null_lists_become_empty():
    agent = AmazonCloudWatchAgent.from_dict(
        {"metadata": {"name": "a"}, "spec": {"env": None, "volumeMounts": None}}
    )

    assert agent.spec.env == []
    assert agent.spec.volume_mounts == []


def test_invalid_mode():
    with pytest.raises(ValidationError):
        AmazonCloudWatchAgent.from_dict({"metadata": {"name": "a"}, "spec": {"mode": "cronjob"}})


def test_owner_reference():
    agent = AmazonCloudWatchAgent.from_dict(
        {"metadata": {"name": "a", "namespace": "ns", "uid": "42"}}
    )

    ref = agent.owner_reference()

    assert ref.kind == "AmazonCloudWatchAgent"
    assert ref.name == "a"
    assert ref.uid == "42"
    assert ref.controller is True
