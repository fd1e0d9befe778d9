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
from .args import container_args
from .env import container_env
from .ports import container_ports
from .volumes import container_volume_mounts


def container(cfg: Config, agent: AmazonCloudWatchAgent, add_config: bool) -> client.V1Container:
    """Build the agent container for the given AmazonCloudWatchAgent.

    The result depends only on cfg, agent.spec and add_config. Ports are
    sorted by name and args by flag, so building twice from the same inputs
    yields equal containers and the workload is not updated needlessly.
    """
    spec = agent.spec
    image = spec.image or cfg.collector_image

    return client.V1Container(
        name=naming.container(),
        image=image,
        image_pull_policy=spec.image_pull_policy,
        ports=container_ports(spec),
        volume_mounts=container_volume_mounts(spec, add_config),
        args=container_args(cfg, spec.args, add_config),
        env=container_env(cfg, spec),
        env_from=list(spec.env_from) or None,
        resources=spec.resources,
        security_context=spec.security_context,
        lifecycle=spec.lifecycle,
    )
