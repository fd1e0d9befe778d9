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
from conftest import api_error, namespace_terminating_error
from kubernetes.client.rest import ApiException

from cwagent_operator.errors import (StepFailed, has_status_cause,
                                     is_forbidden, is_namespace_terminating,
                                     is_not_found)


def test_namespace_terminating():
    assert is_namespace_terminating(namespace_terminating_error())


def test_forbidden_without_cause_is_not_namespace_terminating():
    err = api_error(403, reason="Forbidden")

    assert is_forbidden(err)
    assert not is_namespace_terminating(err)


def test_cause_on_other_status_is_not_namespace_terminating():
    err = api_error(409, causes=[{"reason": "NamespaceTerminating"}])

    assert has_status_cause(err, "NamespaceTerminating")
    assert not is_namespace_terminating(err)


def test_body_is_not_json():
    err = ApiException(status=403, reason="Forbidden")
    err.body = "<html>forbidden</html>"

    assert not has_status_cause(err, "NamespaceTerminating")


@pytest.mark.parametrize(
    "details",
    [
        "namespace is terminating",
        {"causes": "NamespaceTerminating"},
        {"causes": ["NamespaceTerminating", None]},
    ],
)
def test_malformed_status_details(details):
    err = ApiException(status=403, reason="Forbidden")
    err.body = json.dumps({"kind": "Status", "details": details})

    assert not has_status_cause(err, "NamespaceTerminating")
    assert not is_namespace_terminating(err)


def test_body_is_bytes():
    err = namespace_terminating_error()
    err.body = err.body.encode("utf-8")

    assert is_namespace_terminating(err)


def test_non_api_errors():
    assert not is_not_found(ValueError("boom"))
    assert not is_namespace_terminating(RuntimeError("boom"))


def test_wrapped_errors_are_unwrapped():
    cause = ApiException(status=404)
    try:
        raise StepFailed("deployments", cause) from cause
    except StepFailed as e:
        assert is_not_found(e)
        assert str(e).startswith("failed to reconcile deployments")
