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

"""Reconciliation of AmazonCloudWatchAgent resources.

The reconciler is driven by an external watch/work-queue loop which calls
``reconcile`` once per resource identity and requeues with backoff when it
raises. Invocations for different resources may run on different threads;
the only state they share is the task list, which is guarded by a
readers-writer lock.
"""

from collections import namedtuple
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from kubernetes.client.rest import ApiException

from . import reconcile
from .api.cluster_client import ClusterClient
from .config import Config
from .context import Context
from .errors import (
    NotActionable,
    StepFailed,
    StepFailedIgnored,
    is_namespace_terminating,
    is_not_found,
)
from .logging import ResourceLoggerAdapter, logger
from .reconcile.events import EventRecorder
from .reconcile.params import Params
from .utils.rwlock import RWLock


@dataclass(frozen=True)
class Task:
    """A named reconciliation step."""

    do: Callable[[Context, Params], None]
    name: str
    bail_on_error: bool = True


def default_tasks() -> List[Task]:
    # later steps reference objects created by earlier ones
    return [
        Task(reconcile.config_maps, "config maps", True),
        Task(reconcile.service_accounts, "service accounts", True),
        Task(reconcile.services, "services", True),
        Task(reconcile.deployments, "deployments", True),
        Task(reconcile.daemon_sets, "daemon sets", True),
        Task(reconcile.self_status, "amazon-cloudwatch-agent", True),
    ]


@dataclass
class PipelineResult:
    ignored: List[StepFailedIgnored] = field(default_factory=list)
    not_actionable: Optional[NotActionable] = None


class TaskPipeline:
    def __init__(self, tasks: Optional[Sequence[Task]] = None):
        self._tasks = tuple(tasks) if tasks else tuple(default_tasks())
        self._lock = RWLock()

    @property
    def tasks(self) -> Sequence[Task]:
        with self._lock.read_locked():
            return self._tasks

    def set_tasks(self, tasks: Sequence[Task]):
        """Replace the task list; waits for running pipelines to finish."""
        with self._lock.write_locked():
            self._tasks = tuple(tasks)

    def run(self, ctx: Context, params: Params) -> PipelineResult:
        """Run the tasks in order.

        A namespace-terminating error stops the run and is reported on the
        result, not raised. Any other failure of a bail-on-error task is raised
        as StepFailed; failures of the other tasks are logged and collected.
        """
        result = PipelineResult()
        with self._lock.read_locked():
            for task in self._tasks:
                err = ctx.err()
                if err is not None:
                    raise err
                try:
                    task.do(ctx, params)
                except Exception as e:
                    if is_namespace_terminating(e):
                        params.log.debug(
                            "Exiting reconcile loop because namespace is being terminated, namespace=%s",
                            params.instance.namespace,
                        )
                        result.not_actionable = NotActionable(
                            params.instance.namespace, e
                        )
                        return result
                    params.log.error("failed to reconcile %s: %s", task.name, e)
                    if task.bail_on_error:
                        raise StepFailed(task.name, e) from e
                    result.ignored.append(StepFailedIgnored(task.name, e))
        return result


Request = namedtuple("Request", ["namespace", "name"])


@dataclass(frozen=True)
class Result:
    requeue: bool = False


class AmazonCloudWatchAgentReconciler:
    def __init__(
        self,
        client: ClusterClient,
        config: Optional[Config] = None,
        recorder: Optional[EventRecorder] = None,
        tasks: Optional[Sequence[Task]] = None,
    ):
        """Reconciles AmazonCloudWatchAgent resources

        Args:
            client: The cluster client used to read the resource and converge its objects
            config: The operator defaults, read from the environment when not given
            recorder: The event recorder, one writing through client.core_api when not given
            tasks: The reconciliation steps, default_tasks() when not given
        """
        self.client = client
        self.config = config if config is not None else Config.from_env()
        self.recorder = recorder if recorder is not None else EventRecorder(client.core_api)
        self.pipeline = TaskPipeline(tasks)

    def reconcile(self, ctx: Context, request: Request) -> Result:
        """Reconcile the current state of an AmazonCloudWatchAgent with the desired state."""
        log = ResourceLoggerAdapter(logger, request.namespace, request.name)
        try:
            instance = self.client.get_agent(
                request.name, request.namespace, **ctx.api_kwargs()
            )
        except ApiException as e:
            # a deleted resource can't be fixed by a requeue, a new event will follow
            if is_not_found(e):
                return Result()
            log.error(
                "unable to fetch AmazonCloudWatchAgent %s/%s: %s",
                request.namespace,
                request.name,
                e,
            )
            raise

        params = Params(
            config=self.config,
            client=self.client,
            instance=instance,
            log=log,
            recorder=self.recorder,
            scheme=self.client.api_client,
        )
        self.run_tasks(ctx, params)
        return Result()

    def run_tasks(self, ctx: Context, params: Params) -> PipelineResult:
        return self.pipeline.run(ctx, params)

    def set_tasks(self, tasks: Sequence[Task]):
        self.pipeline.set_tasks(tasks)
