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

import logging
from dataclasses import dataclass
from typing import Any, Union

from kubernetes import client

from ..api.cluster_client import ClusterClient
from ..config import Config
from ..models import AmazonCloudWatchAgent
from .events import EventRecorder


@dataclass
class Params:
    """Everything one reconciliation of one AmazonCloudWatchAgent needs.

    Built fresh by the reconciler for every invocation and never shared.
    """

    config: Config
    client: ClusterClient
    instance: AmazonCloudWatchAgent
    log: Union[logging.Logger, logging.LoggerAdapter]
    recorder: EventRecorder
    scheme: Any = None

    def __post_init__(self):
        if self.scheme is None:
            self.scheme = getattr(self.client, "api_client", None) or client.ApiClient()
