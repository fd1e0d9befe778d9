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

"""Create-or-update helpers shared by the per-kind reconciliation tasks."""

from collections import namedtuple
from typing import Callable, List, Optional

from kubernetes.client.rest import ApiException

from ..constants import constants
from ..context import Context
from ..errors import is_not_found
from ..manifests.labels import label_selector
from .params import Params

KindOps = namedtuple("KindOps", ["kind", "read", "create", "replace", "list", "delete"])


def config_map_ops(cluster) -> KindOps:
    api = cluster.core_api
    return KindOps(
        "config map",
        api.read_namespaced_config_map,
        api.create_namespaced_config_map,
        api.replace_namespaced_config_map,
        api.list_namespaced_config_map,
        api.delete_namespaced_config_map,
    )


def service_account_ops(cluster) -> KindOps:
    api = cluster.core_api
    return KindOps(
        "service account",
        api.read_namespaced_service_account,
        api.create_namespaced_service_account,
        api.replace_namespaced_service_account,
        api.list_namespaced_service_account,
        api.delete_namespaced_service_account,
    )


def service_ops(cluster) -> KindOps:
    api = cluster.core_api
    return KindOps(
        "service",
        api.read_namespaced_service,
        api.create_namespaced_service,
        api.replace_namespaced_service,
        api.list_namespaced_service,
        api.delete_namespaced_service,
    )


def deployment_ops(cluster) -> KindOps:
    api = cluster.app_api
    return KindOps(
        "deployment",
        api.read_namespaced_deployment,
        api.create_namespaced_deployment,
        api.replace_namespaced_deployment,
        api.list_namespaced_deployment,
        api.delete_namespaced_deployment,
    )


def daemon_set_ops(cluster) -> KindOps:
    api = cluster.app_api
    return KindOps(
        "daemon set",
        api.read_namespaced_daemon_set,
        api.create_namespaced_daemon_set,
        api.replace_namespaced_daemon_set,
        api.list_namespaced_daemon_set,
        api.delete_namespaced_daemon_set,
    )


def create_or_update(
    ctx: Context,
    params: Params,
    ops: KindOps,
    desired,
    merge: Optional[Callable] = None,
):
    """Create desired, or replace the live object with it.

    merge(existing, desired) copies server-owned fields onto desired before a
    replace.
    """
    name = desired.metadata.name
    namespace = desired.metadata.namespace
    kwargs = ctx.api_kwargs()
    try:
        existing = ops.read(name, namespace, **kwargs)
    except ApiException as e:
        if not is_not_found(e):
            raise
        ops.create(namespace, desired, **kwargs)
        params.log.debug("created %s %s/%s", ops.kind, namespace, name)
        params.recorder.event(
            params.instance,
            constants.EVENT_NORMAL,
            "Created",
            f"Created {ops.kind} {name}",
        )
        return

    desired.metadata.resource_version = existing.metadata.resource_version
    if merge is not None:
        merge(existing, desired)
    ops.replace(name, namespace, desired, **kwargs)
    params.log.debug("updated %s %s/%s", ops.kind, namespace, name)


def delete_stale(ctx: Context, params: Params, ops: KindOps, desired: List):
    """Delete objects of this kind owned by the instance that are no longer desired."""
    keep = {obj.metadata.name for obj in desired}
    agent = params.instance
    kwargs = ctx.api_kwargs()
    existing = ops.list(agent.namespace, label_selector=label_selector(agent), **kwargs)
    for item in existing.items:
        name = item.metadata.name
        if name in keep:
            continue
        try:
            ops.delete(name, agent.namespace, **kwargs)
        except ApiException as e:
            if not is_not_found(e):
                raise
        params.log.debug("deleted %s %s/%s", ops.kind, agent.namespace, name)


def expected(ctx: Context, params: Params, ops: KindOps, desired: List, merge=None):
    for obj in desired:
        create_or_update(ctx, params, ops, obj, merge=merge)
    delete_stale(ctx, params, ops, desired)
