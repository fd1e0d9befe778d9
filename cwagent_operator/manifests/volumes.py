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

import posixpath
from typing import List

from kubernetes import client

from .. import naming
from ..constants import constants
from ..models import AmazonCloudWatchAgentSpec


def _join(*parts):
    # unlike posixpath.join, an absolute part does not discard the parts before it
    return posixpath.normpath("/".join(p for p in parts if p))


def container_volume_mounts(
    spec: AmazonCloudWatchAgentSpec, add_config: bool
) -> List[client.V1VolumeMount]:
    volume_mounts = []
    if add_config:
        volume_mounts.append(
            client.V1VolumeMount(
                name=naming.config_map_volume(),
                mount_path=constants.CONFIG_MOUNT_PATH,
            )
        )

    volume_mounts.extend(spec.volume_mounts)

    for cfg_map in spec.config_maps:
        volume_name = naming.config_map_extra(cfg_map.name)
        volume_mounts.append(
            client.V1VolumeMount(
                name=volume_name,
                mount_path=_join(
                    constants.EXTRA_CONFIG_MOUNT_ROOT, cfg_map.mount_path, volume_name
                ),
            )
        )
    return volume_mounts
