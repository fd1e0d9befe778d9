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

from unittest.mock import MagicMock

from conftest import make_agent
from kubernetes.client.rest import ApiException

from cwagent_operator.reconcile.events import EventRecorder


def test_event_is_created_for_agent():
    core_api = MagicMock()
    agent = make_agent()

    EventRecorder(core_api).event(agent, "Normal", "Created", "Created config map cloudwatch-agent")

    namespace, body = core_api.create_namespaced_event.call_args[0]
    assert namespace == "amazon-cloudwatch"
    assert body.involved_object.kind == "AmazonCloudWatchAgent"
    assert body.involved_object.name == "cloudwatch-agent"
    assert body.reason == "Created"
    assert body.type == "Normal"
    assert body.source.component == "amazon-cloudwatch-agent-operator"


def test_event_failure_is_logged_not_raised(caplog):
    core_api = MagicMock()
    core_api.create_namespaced_event.side_effect = ApiException(status=403)

    EventRecorder(core_api).event(make_agent(), "Warning", "Failed", "boom")

    assert "failed to record event Failed" in caplog.text


def test_event_connection_failure_is_logged_not_raised(caplog):
    core_api = MagicMock()
    core_api.create_namespaced_event.side_effect = ConnectionError("connection refused")

    EventRecorder(core_api).event(make_agent(), "Normal", "Created", "Created service cloudwatch-agent")

    assert "failed to record event Created" in caplog.text
    assert "connection refused" in caplog.text
