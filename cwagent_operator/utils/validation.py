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

"""Validation rules for port names and numbers, as enforced by the Kubernetes API server."""

import re
from typing import List

from ..constants import constants

_PORT_NAME_CHARSET = re.compile(r"^[-a-z0-9]+$")
_PORT_NAME_ONE_LETTER = re.compile(r"[a-z]")


def is_valid_port_name(port: str) -> List[str]:
    """Check that port is a valid IANA_SVC_NAME; returns the list of violations."""
    errs = []
    if len(port) > constants.MAX_PORT_NAME_LEN:
        errs.append(
            f"must be no more than {constants.MAX_PORT_NAME_LEN} characters"
        )
    if not _PORT_NAME_CHARSET.match(port):
        errs.append(
            "must contain only alpha-numeric characters (a-z, 0-9), and hyphens (-)"
        )
    if not _PORT_NAME_ONE_LETTER.search(port):
        errs.append("must contain at least one letter (a-z)")
    if "--" in port:
        errs.append("must not contain consecutive hyphens")
    if port and (port[0] == "-" or port[-1] == "-"):
        errs.append("must not begin or end with a hyphen")
    return errs


def is_valid_port_num(port: int) -> List[str]:
    if constants.MIN_PORT_NUM <= port <= constants.MAX_PORT_NUM:
        return []
    return [
        f"must be between {constants.MIN_PORT_NUM} and {constants.MAX_PORT_NUM}, inclusive"
    ]
