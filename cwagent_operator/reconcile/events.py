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

import datetime

from kubernetes import client

from ..logging import logger
from ..models import AmazonCloudWatchAgent

EVENT_SOURCE_COMPONENT = "amazon-cloudwatch-agent-operator"


class EventRecorder:
    """Records core/v1 Events against AmazonCloudWatchAgent resources."""

    def __init__(self, core_api, component=EVENT_SOURCE_COMPONENT):
        self.core_api = core_api
        self.component = component

    def event(self, agent: AmazonCloudWatchAgent, event_type, reason, message):
        now = datetime.datetime.now(datetime.timezone.utc)
        body = client.CoreV1Event(
            metadata=client.V1ObjectMeta(
                generate_name=f"{agent.name}.", namespace=agent.namespace
            ),
            involved_object=client.V1ObjectReference(
                api_version=agent.api_version,
                kind=agent.kind,
                name=agent.name,
                namespace=agent.namespace,
                uid=agent.metadata.uid,
            ),
            reason=reason,
            message=message,
            type=event_type,
            count=1,
            first_timestamp=now,
            last_timestamp=now,
            source=client.V1EventSource(component=self.component),
        )
        try:
            self.core_api.create_namespaced_event(agent.namespace, body)
        except Exception as e:
            logger.warning(
                "failed to record event %s for %s/%s: %s",
                reason,
                agent.namespace,
                agent.name,
                e,
            )
