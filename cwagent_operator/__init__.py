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

from .config import Config  # noqa: F401
from .context import Context  # noqa: F401
from .controller import (  # noqa: F401
    AmazonCloudWatchAgentReconciler,
    PipelineResult,
    Request,
    Result,
    Task,
    TaskPipeline,
    default_tasks,
)
from .api.cluster_client import ClusterClient  # noqa: F401
from .constants import constants  # noqa: F401
from .manifests.container import container  # noqa: F401
from .models import AmazonCloudWatchAgent, AmazonCloudWatchAgentSpec  # noqa: F401
