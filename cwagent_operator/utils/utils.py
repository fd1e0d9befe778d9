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

import os
import re

from kubernetes import client

_api_client = client.ApiClient()

_DNS_LABEL_INVALID = re.compile(r"[^a-z0-9-]")
_TRAILING_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+$")
_LEADING_NON_ALNUM = re.compile(r"^[^A-Za-z0-9]+")


def is_running_in_k8s():
    return os.path.isdir("/var/run/secrets/kubernetes.io/")


def deserialize(obj, klass: str):
    """Turn plain JSON data into kubernetes client models.

    Walks the data directly; ApiClient.deserialize takes an HTTP response
    whose signature differs between client releases.

    :param obj: dict/list as returned by CustomObjectsApi
    :param klass: kubernetes client type name, e.g. "V1EnvVar" or "list[V1EnvVar]"
    """
    if obj is None:
        return None
    return _api_client._ApiClient__deserialize(obj, klass)


def truncate(name: str, max_len: int) -> str:
    """Cut name to max_len and drop trailing non-alphanumeric characters."""
    if len(name) > max_len:
        name = name[:max_len]
    return _TRAILING_NON_ALNUM.sub("", name)


def dns_name(name: str, max_len: int = 63) -> str:
    """Make name a valid DNS-1123 label."""
    name = _DNS_LABEL_INVALID.sub("-", name.lower())
    name = truncate(name, max_len)
    return _LEADING_NON_ALNUM.sub("", name)
