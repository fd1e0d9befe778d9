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

"""Names of the objects generated for an AmazonCloudWatchAgent."""

from .constants import constants
from .utils.utils import dns_name, truncate


def container() -> str:
    return "otc-container"


def config_map_volume() -> str:
    return "otc-internal"


def config_map_extra(name: str) -> str:
    return dns_name(f"configmap-{name}")


def config_map(agent_name: str) -> str:
    return dns_name(agent_name)


def service_account(agent_name: str) -> str:
    return dns_name(agent_name)


def service(agent_name: str) -> str:
    return dns_name(agent_name)


def headless_service(agent_name: str) -> str:
    return dns_name(f"{service(agent_name)}-headless")


def deployment(agent_name: str) -> str:
    return dns_name(agent_name)


def daemon_set(agent_name: str) -> str:
    return dns_name(agent_name)


def instance(namespace: str, name: str) -> str:
    return truncate(f"{namespace}.{name}", constants.MAX_LABEL_VALUE_LEN)
