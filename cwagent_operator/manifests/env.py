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

from typing import List

from kubernetes import client

from ..config import Config
from ..constants import constants
from ..models import AmazonCloudWatchAgentSpec


def pod_name_env() -> client.V1EnvVar:
    """POD_NAME is resolved by the kubelet when the pod starts."""
    return client.V1EnvVar(
        name=constants.POD_NAME_ENV,
        value_from=client.V1EnvVarSource(
            field_ref=client.V1ObjectFieldSelector(field_path="metadata.name")
        ),
    )


def proxy_env(cfg: Config) -> List[client.V1EnvVar]:
    return [client.V1EnvVar(name=name, value=value) for name, value in cfg.proxy_env]


def container_env(cfg: Config, spec: AmazonCloudWatchAgentSpec) -> List[client.V1EnvVar]:
    """User variables as declared, then POD_NAME, then the operator's proxy settings."""
    env_vars = list(spec.env)
    env_vars.append(pod_name_env())
    env_vars.extend(proxy_env(cfg))
    return env_vars
