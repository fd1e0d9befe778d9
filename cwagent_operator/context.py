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

import threading
from typing import Optional

from .errors import ReconcileCancelled


class Context:
    """Cancellation and timeout scope of one reconciliation.

    Tasks pass ``request_timeout`` to every API call as ``_request_timeout`` so
    a call in flight is bounded, and the pipeline checks ``cancelled()``
    before starting the next task.
    """

    def __init__(self, request_timeout: Optional[float] = None):
        self.request_timeout = request_timeout
        self._done = threading.Event()

    def cancel(self):
        self._done.set()

    def cancelled(self) -> bool:
        return self._done.is_set()

    def err(self) -> Optional[ReconcileCancelled]:
        if self.cancelled():
            return ReconcileCancelled()
        return None

    def api_kwargs(self):
        """Keyword arguments forwarded to kubernetes client calls."""
        if self.request_timeout is None:
            return {}
        return {"_request_timeout": self.request_timeout}
