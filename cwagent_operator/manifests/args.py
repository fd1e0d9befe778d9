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

from typing import Dict, List

from ..config import Config
from ..constants import constants
from ..logging import logger


def container_args(cfg: Config, spec_args: Dict[str, str], add_config: bool) -> List[str]:
    """Build the agent command line.

    With add_config the primary configuration flag always comes first and a
    user supplied "config" flag is ignored. The remaining flags follow sorted,
    so the same flags in any order produce the same container.
    """
    args_map = dict(spec_args or {})
    args = []
    if add_config:
        if constants.RESERVED_CONFIG_ARG in args_map:
            logger.info(
                "the '%s' flag isn't allowed and is being ignored",
                constants.RESERVED_CONFIG_ARG,
            )
            del args_map[constants.RESERVED_CONFIG_ARG]
        args.append(
            f"--{constants.RESERVED_CONFIG_ARG}="
            f"{constants.CONFIG_ARG_PREFIX}/{cfg.collector_config_map_entry}"
        )

    args.extend(f"--{k}={args_map[k]}" for k in sorted(args_map))
    return args
