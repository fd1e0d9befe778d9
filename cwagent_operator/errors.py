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
from typing import Optional

from kubernetes.client.rest import ApiException

from .constants import constants


class NotActionable(Exception):
    """
    Exception class indicating the target namespace is being deleted.
    Nothing a reconciliation does can succeed there, so it is reported as success.
    """

    def __init__(self, namespace=None, cause=None):
        self.namespace = namespace
        self.cause = cause

    def __str__(self):
        return f"namespace {self.namespace} is being terminated"


class StepFailed(RuntimeError):
    """
    Exception class indicating a bail-on-error reconciliation task failed.
    The original error is chained as __cause__.
    """

    def __init__(self, task_name, cause):
        self.task_name = task_name
        self.cause = cause

    def __str__(self):
        return f"failed to reconcile {self.task_name}: {self.cause}"


class StepFailedIgnored(Exception):
    """
    Exception class recording a failed task whose failure did not stop the pipeline.
    """

    def __init__(self, task_name, cause):
        self.task_name = task_name
        self.cause = cause

    def __str__(self):
        return f"failed to reconcile {self.task_name} (ignored): {self.cause}"


class ReconcileCancelled(RuntimeError):
    def __init__(self, reason="reconciliation context cancelled"):
        self.reason = reason

    def __str__(self):
        return self.reason


def _unwrap(err: BaseException) -> Optional[ApiException]:
    while err is not None:
        if isinstance(err, ApiException):
            return err
        err = err.__cause__
    return None


def is_not_found(err: BaseException) -> bool:
    api_err = _unwrap(err)
    return api_err is not None and api_err.status == 404


def is_forbidden(err: BaseException) -> bool:
    api_err = _unwrap(err)
    return api_err is not None and api_err.status == 403


def has_status_cause(err: BaseException, cause_type: str) -> bool:
    """Returns True if the Status body of the API error lists the given cause.

    Status causes serialize their type under the "reason" key.
    """
    api_err = _unwrap(err)
    if api_err is None or not api_err.body:
        return False
    body = api_err.body
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        status = json.loads(body)
    except ValueError:
        return False
    if not isinstance(status, dict):
        return False
    details = status.get("details")
    if not isinstance(details, dict):
        return False
    causes = details.get("causes")
    if not isinstance(causes, list):
        return False
    for cause in causes:
        if isinstance(cause, dict) and cause.get("reason") == cause_type:
            return True
    return False


def is_namespace_terminating(err: BaseException) -> bool:
    return is_forbidden(err) and has_status_cause(
        err, constants.NAMESPACE_TERMINATING_CAUSE
    )
