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

"""Data model of the AmazonCloudWatchAgent custom resource.

The resource arrives as the plain dict returned by CustomObjectsApi. Fields
holding core Kubernetes types are turned into kubernetes client models so
they can be embedded in generated objects unchanged.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional

from kubernetes import client
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..constants import constants
from ..utils.utils import deserialize


def _k8s_list(klass: str):
    def _convert(value):
        if value is None:
            return []
        if isinstance(value, list) and any(isinstance(v, dict) for v in value):
            return deserialize(value, f"list[{klass}]")
        return value

    return _convert


def _k8s_object(klass: str):
    def _convert(value):
        if isinstance(value, dict):
            return deserialize(value, klass)
        return value

    return _convert


EnvVarList = Annotated[List[client.V1EnvVar], BeforeValidator(_k8s_list("V1EnvVar"))]
EnvFromList = Annotated[
    List[client.V1EnvFromSource], BeforeValidator(_k8s_list("V1EnvFromSource"))
]
VolumeMountList = Annotated[
    List[client.V1VolumeMount], BeforeValidator(_k8s_list("V1VolumeMount"))
]
VolumeList = Annotated[List[client.V1Volume], BeforeValidator(_k8s_list("V1Volume"))]
ServicePortList = Annotated[
    List[client.V1ServicePort], BeforeValidator(_k8s_list("V1ServicePort"))
]
TolerationList = Annotated[
    List[client.V1Toleration], BeforeValidator(_k8s_list("V1Toleration"))
]
Resources = Annotated[
    Optional[client.V1ResourceRequirements],
    BeforeValidator(_k8s_object("V1ResourceRequirements")),
]
SecurityContext = Annotated[
    Optional[client.V1SecurityContext],
    BeforeValidator(_k8s_object("V1SecurityContext")),
]
PodSecurityContext = Annotated[
    Optional[client.V1PodSecurityContext],
    BeforeValidator(_k8s_object("V1PodSecurityContext")),
]
Lifecycle = Annotated[
    Optional[client.V1Lifecycle], BeforeValidator(_k8s_object("V1Lifecycle"))
]


class ConfigMapsSpec(BaseModel):
    """An additional config map mounted into the agent container."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    mount_path: str = Field("", alias="mountpath")


class AgentMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    namespace: str = ""
    uid: Optional[str] = None
    generation: Optional[int] = None
    resource_version: Optional[str] = Field(None, alias="resourceVersion")
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)


class AmazonCloudWatchAgentSpec(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, arbitrary_types_allowed=True, extra="ignore"
    )

    mode: Literal[
        constants.MODE_DEPLOYMENT,
        constants.MODE_DAEMONSET,
        constants.MODE_STATEFULSET,
        constants.MODE_SIDECAR,
    ] = constants.MODE_DEPLOYMENT
    replicas: Optional[int] = None
    service_account: str = Field("", alias="serviceAccount")
    image: str = ""
    image_pull_policy: Optional[str] = Field(None, alias="imagePullPolicy")
    config: str = ""
    args: Dict[str, str] = Field(default_factory=dict)
    env: EnvVarList = Field(default_factory=list)
    env_from: EnvFromList = Field(default_factory=list, alias="envFrom")
    volume_mounts: VolumeMountList = Field(default_factory=list, alias="volumeMounts")
    volumes: VolumeList = Field(default_factory=list)
    config_maps: List[ConfigMapsSpec] = Field(default_factory=list, alias="configmaps")
    ports: ServicePortList = Field(default_factory=list)
    resources: Resources = None
    security_context: SecurityContext = Field(None, alias="securityContext")
    pod_security_context: PodSecurityContext = Field(None, alias="podSecurityContext")
    lifecycle: Lifecycle = None
    node_selector: Dict[str, str] = Field(default_factory=dict, alias="nodeSelector")
    tolerations: TolerationList = Field(default_factory=list)
    host_network: bool = Field(False, alias="hostNetwork")
    priority_class_name: Optional[str] = Field(None, alias="priorityClassName")
    pod_annotations: Dict[str, str] = Field(default_factory=dict, alias="podAnnotations")


class AmazonCloudWatchAgentScale(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    replicas: Optional[int] = None
    selector: Optional[str] = None


class AmazonCloudWatchAgentStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: str = ""
    image: str = ""
    scale: AmazonCloudWatchAgentScale = Field(default_factory=AmazonCloudWatchAgentScale)


class AmazonCloudWatchAgent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_version: str = Field(constants.CWAGENT_V1ALPHA1, alias="apiVersion")
    kind: str = constants.CWAGENT_KIND
    metadata: AgentMetadata
    spec: AmazonCloudWatchAgentSpec = Field(default_factory=AmazonCloudWatchAgentSpec)
    status: AmazonCloudWatchAgentStatus = Field(
        default_factory=AmazonCloudWatchAgentStatus
    )

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "AmazonCloudWatchAgent":
        return cls.model_validate(obj)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def owner_reference(self) -> client.V1OwnerReference:
        return client.V1OwnerReference(
            api_version=self.api_version,
            kind=self.kind,
            name=self.metadata.name,
            uid=self.metadata.uid or "",
            controller=True,
            block_owner_deletion=True,
        )
