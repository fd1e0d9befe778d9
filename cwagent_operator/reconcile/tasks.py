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

"""Convergence steps run by the reconciler, one per object kind."""

from ..constants import constants
from ..context import Context
from ..manifests import configmap, serviceaccount, workload
from ..manifests import service as service_manifests
from ..manifests.container import container
from ..manifests.labels import label_selector
from .objects import (
    config_map_ops,
    daemon_set_ops,
    deployment_ops,
    expected,
    service_account_ops,
    service_ops,
)
from .params import Params


def config_maps(ctx: Context, params: Params):
    desired = [configmap.config_map(params.config, params.instance)]
    expected(ctx, params, config_map_ops(params.client), desired)


def service_accounts(ctx: Context, params: Params):
    desired = []
    if not params.instance.spec.service_account:
        desired.append(serviceaccount.service_account(params.instance))
    expected(ctx, params, service_account_ops(params.client), desired)


def _keep_cluster_ip(existing, desired):
    # spec.clusterIP is immutable once allocated
    if existing.spec is not None and existing.spec.cluster_ip:
        desired.spec.cluster_ip = existing.spec.cluster_ip
        desired.spec.cluster_i_ps = existing.spec.cluster_i_ps


def services(ctx: Context, params: Params):
    desired = service_manifests.services(params.instance)
    expected(ctx, params, service_ops(params.client), desired, merge=_keep_cluster_ip)


def deployments(ctx: Context, params: Params):
    desired = []
    if params.instance.spec.mode == constants.MODE_DEPLOYMENT:
        desired.append(workload.deployment(params.config, params.instance))
    expected(ctx, params, deployment_ops(params.client), desired)


def daemon_sets(ctx: Context, params: Params):
    desired = []
    if params.instance.spec.mode == constants.MODE_DAEMONSET:
        desired.append(workload.daemon_set(params.config, params.instance))
    expected(ctx, params, daemon_set_ops(params.client), desired)


def desired_status(params: Params) -> dict:
    agent = params.instance
    status = {
        "version": params.config.operator_version,
        "image": container(params.config, agent, add_config=True).image,
    }
    if agent.spec.mode == constants.MODE_DEPLOYMENT:
        replicas = agent.spec.replicas if agent.spec.replicas is not None else 1
        status["scale"] = {"replicas": replicas, "selector": label_selector(agent)}
    return status


def self_status(ctx: Context, params: Params):
    """Report the operator version, agent image and scale on the resource status."""
    agent = params.instance
    status = desired_status(params)
    current = agent.status.model_dump(exclude_none=True)
    if all(current.get(k) == v for k, v in status.items()):
        return
    params.client.patch_agent_status(
        agent.name, agent.namespace, status, **ctx.api_kwargs()
    )
