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

import logging
from unittest.mock import MagicMock

import pytest
from conftest import api_error, make_agent, namespace_terminating_error
from kubernetes.client.rest import ApiException

from cwagent_operator.config import Config
from cwagent_operator.context import Context
from cwagent_operator.controller import (AmazonCloudWatchAgentReconciler,
                                         Request, Result, Task)
from cwagent_operator.errors import StepFailed

REQUEST = Request(namespace="amazon-cloudwatch", name="cloudwatch-agent")


def _named_tasks(**side_effects):
    names = ["config maps", "service accounts", "services", "deployments",
             "daemon sets", "amazon-cloudwatch-agent"]
    return [Task(MagicMock(name=n, side_effect=side_effects.get(n)), n, True) for n in names]


def _reconciler(cluster, tasks):
    return AmazonCloudWatchAgentReconciler(
        cluster, config=Config(), recorder=MagicMock(), tasks=tasks
    )


def test_resource_not_found_is_success():
    cluster = MagicMock()
    cluster.get_agent.side_effect = ApiException(status=404, reason="Not Found")
    tasks = _named_tasks()

    result = _reconciler(cluster, tasks).reconcile(Context(), REQUEST)

    assert result == Result(requeue=False)
    for task in tasks:
        task.do.assert_not_called()


def test_fetch_error_is_raised():
    cluster = MagicMock()
    cluster.get_agent.side_effect = ApiException(status=500, reason="Internal Server Error")
    tasks = _named_tasks()

    with pytest.raises(ApiException):
        _reconciler(cluster, tasks).reconcile(Context(), REQUEST)

    for task in tasks:
        task.do.assert_not_called()


def test_fetch_uses_request_identity_and_timeout():
    cluster = MagicMock()
    cluster.get_agent.return_value = make_agent()

    _reconciler(cluster, _named_tasks()).reconcile(Context(request_timeout=5), REQUEST)

    cluster.get_agent.assert_called_once_with(
        "cloudwatch-agent", "amazon-cloudwatch", _request_timeout=5
    )


def test_all_tasks_succeed():
    cluster = MagicMock()
    agent = make_agent()
    cluster.get_agent.return_value = agent
    tasks = _named_tasks()
    reconciler = _reconciler(cluster, tasks)

    result = reconciler.reconcile(Context(), REQUEST)

    assert result == Result()
    for task in tasks:
        task.do.assert_called_once()
    params = tasks[0].do.call_args[0][1]
    assert params.instance is agent
    assert params.config is reconciler.config
    assert params.client is cluster


def test_params_are_fresh_per_invocation():
    cluster = MagicMock()
    cluster.get_agent.return_value = make_agent()
    tasks = _named_tasks()
    reconciler = _reconciler(cluster, tasks)

    reconciler.reconcile(Context(), REQUEST)
    reconciler.reconcile(Context(), REQUEST)

    first, second = [c[0][1] for c in tasks[0].do.call_args_list]
    assert first is not second


def test_deployment_failure_stops_reconcile():
    cluster = MagicMock()
    cluster.get_agent.return_value = make_agent()
    err = api_error(500, reason="Internal Server Error")
    tasks = _named_tasks(deployments=err)

    with pytest.raises(StepFailed) as exc_info:
        _reconciler(cluster, tasks).reconcile(Context(), REQUEST)

    assert exc_info.value.__cause__ is err
    names = {t.name: t for t in tasks}
    names["deployments"].do.assert_called_once()
    names["daemon sets"].do.assert_not_called()
    names["amazon-cloudwatch-agent"].do.assert_not_called()


def test_step_failure_log_names_the_resource(caplog):
    cluster = MagicMock()
    cluster.get_agent.return_value = make_agent()
    tasks = _named_tasks(deployments=api_error(500, reason="Internal Server Error"))

    with caplog.at_level(logging.ERROR, logger="cwagent_operator"):
        with pytest.raises(StepFailed):
            _reconciler(cluster, tasks).reconcile(Context(), REQUEST)

    record = next(r for r in caplog.records if "failed to reconcile deployments" in r.getMessage())
    assert record.getMessage().startswith(
        "[amazoncloudwatchagent=amazon-cloudwatch/cloudwatch-agent] "
    )
    assert record.amazoncloudwatchagent == "amazon-cloudwatch/cloudwatch-agent"


def test_namespace_terminating_is_success():
    cluster = MagicMock()
    cluster.get_agent.return_value = make_agent()
    tasks = _named_tasks(services=namespace_terminating_error())

    result = _reconciler(cluster, tasks).reconcile(Context(), REQUEST)

    assert result == Result()
    names = {t.name: t for t in tasks}
    names["deployments"].do.assert_not_called()


def test_set_tasks():
    cluster = MagicMock()
    cluster.get_agent.return_value = make_agent()
    reconciler = _reconciler(cluster, _named_tasks())
    replacement = Task(MagicMock(), "only", True)

    reconciler.set_tasks([replacement])
    reconciler.reconcile(Context(), REQUEST)

    replacement.do.assert_called_once()


def test_default_recorder_uses_core_api():
    cluster = MagicMock()

    reconciler = AmazonCloudWatchAgentReconciler(cluster, config=Config())

    assert reconciler.recorder.core_api is cluster.core_api
