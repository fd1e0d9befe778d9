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

from kubernetes import client

from .. import naming
from ..config import Config
from ..models import AmazonCloudWatchAgent
from .labels import object_meta


def config_map(cfg: Config, agent: AmazonCloudWatchAgent) -> client.V1ConfigMap:
    """The config map holding the agent configuration from spec.config."""
    return client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=object_meta(agent, naming.config_map(agent.name)),
        data={cfg.collector_config_map_entry: agent.spec.config},
    )

