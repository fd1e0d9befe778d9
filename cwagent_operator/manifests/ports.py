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

from typing import Dict, Iterable, List, Tuple

from kubernetes import client

from ..constants import constants
from ..logging import logger
from ..models import AmazonCloudWatchAgentSpec
from ..utils.utils import truncate
from ..utils.validation import is_valid_port_name, is_valid_port_num


def default_container_ports(
    default_ports: Iterable[Tuple[str, int, str]] = constants.CLOUDWATCH_AGENT_PORTS,
) -> Dict[str, client.V1ContainerPort]:
    """Build the default agent ports keyed by name.

    Names are cut to the 15 characters a port name may hold. Ports whose name
    or number is still invalid afterwards are dropped.
    """
    ports = {}
    for name, number, protocol in default_ports:
        trunc_name = truncate(name, constants.MAX_PORT_NAME_LEN)
        if trunc_name != name:
            logger.info(
                "truncating container port name, port.name.prev=%s port.name.new=%s",
                name,
                trunc_name,
            )
        name_errs = is_valid_port_name(trunc_name)
        num_errs = is_valid_port_num(number)
        if name_errs or num_errs:
            logger.info(
                "dropping invalid container port, port.name=%s port.num=%s "
                "port.name.errs=%s num.errs=%s",
                trunc_name,
                number,
                name_errs,
                num_errs,
            )
            continue
        ports[trunc_name] = client.V1ContainerPort(
            name=trunc_name, container_port=number, protocol=protocol
        )
    return ports


def port_map_to_list(
    port_map: Dict[str, client.V1ContainerPort],
) -> List[client.V1ContainerPort]:
    return [port_map[name] for name in sorted(port_map)]


def container_ports(
    spec: AmazonCloudWatchAgentSpec,
    default_ports: Iterable[Tuple[str, int, str]] = constants.CLOUDWATCH_AGENT_PORTS,
) -> List[client.V1ContainerPort]:
    """Resolve the container ports: defaults overlaid with spec.ports, sorted by name."""
    ports = default_container_ports(default_ports)
    # ports declared on the resource replace defaults of the same name
    for p in spec.ports:
        ports[p.name] = client.V1ContainerPort(
            name=p.name, container_port=p.port, protocol=p.protocol
        )
    return port_map_to_list(ports)
