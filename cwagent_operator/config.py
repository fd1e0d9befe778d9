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

"""Operator configuration."""

import os
from typing import List, Mapping, Optional, Tuple

from .constants import constants


def read_proxy_vars(environ: Mapping[str, str]) -> List[Tuple[str, str]]:
    """Collect the proxy settings of the operator process.

    Every variable that is set is returned twice, upper and lower case, in the
    order of constants.PROXY_ENV_NAMES.
    """
    proxy_vars = []
    for name in constants.PROXY_ENV_NAMES:
        if name in environ:
            value = environ[name]
            proxy_vars.append((name, value))
            proxy_vars.append((name.lower(), value))
    return proxy_vars


class Config:
    def __init__(
        self,
        collector_image: str = constants.DEFAULT_COLLECTOR_IMAGE,
        collector_config_map_entry: str = constants.DEFAULT_COLLECTOR_CONFIG_MAP_ENTRY,
        operator_version: str = constants.DEFAULT_OPERATOR_VERSION,
        proxy_env: Optional[List[Tuple[str, str]]] = None,
    ):
        """The configuration defaults the operator applies to every AmazonCloudWatchAgent

        Args:
            collector_image: The agent image used when the resource does not set one
            collector_config_map_entry: The key of the agent configuration inside the generated config map
            operator_version: The operator version reported on the resource status
            proxy_env: The proxy variables injected into the agent container, as (name, value) pairs
        """
        self._collector_image = collector_image
        self._collector_config_map_entry = collector_config_map_entry
        self._operator_version = operator_version
        self._proxy_env = tuple(proxy_env or ())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        if environ is None:
            environ = os.environ
        return cls(
            collector_image=environ.get(
                constants.ENV_COLLECTOR_IMAGE, constants.DEFAULT_COLLECTOR_IMAGE
            ),
            collector_config_map_entry=environ.get(
                constants.ENV_COLLECTOR_CONFIG_MAP_ENTRY,
                constants.DEFAULT_COLLECTOR_CONFIG_MAP_ENTRY,
            ),
            operator_version=environ.get(
                constants.ENV_OPERATOR_VERSION, constants.DEFAULT_OPERATOR_VERSION
            ),
            proxy_env=read_proxy_vars(environ),
        )

    @property
    def collector_image(self) -> str:
        """Get the default agent image."""
        return self._collector_image

    @property
    def collector_config_map_entry(self) -> str:
        """Get the config map key holding the agent configuration."""
        return self._collector_config_map_entry

    @property
    def operator_version(self) -> str:
        """Get the operator version."""
        return self._operator_version

    @property
    def proxy_env(self) -> Tuple[Tuple[str, str], ...]:
        """Get the proxy variables captured when the config was built."""
        return self._proxy_env
