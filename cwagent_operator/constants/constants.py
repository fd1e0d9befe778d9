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

import os

# AmazonCloudWatchAgent K8S constants
CWAGENT_GROUP = "cloudwatch.aws.amazon.com"
CWAGENT_KIND = "AmazonCloudWatchAgent"
CWAGENT_PLURAL = "amazoncloudwatchagents"
CWAGENT_V1ALPHA1_VERSION = "v1alpha1"
CWAGENT_V1ALPHA1 = CWAGENT_GROUP + "/" + CWAGENT_V1ALPHA1_VERSION

CWAGENT_OPERATOR_LOGLEVEL = os.environ.get("CWAGENT_OPERATOR_LOGLEVEL", "INFO").upper()

# Operator defaults
DEFAULT_COLLECTOR_IMAGE = "public.ecr.aws/cloudwatch-agent/cloudwatch-agent:latest"
DEFAULT_COLLECTOR_CONFIG_MAP_ENTRY = "cwagentconfig.json"
DEFAULT_OPERATOR_VERSION = "0.0.0"

# Environment variables read by the operator process
ENV_COLLECTOR_IMAGE = "RELATED_IMAGE_COLLECTOR"
ENV_COLLECTOR_CONFIG_MAP_ENTRY = "COLLECTOR_CONFIG_MAP_ENTRY"
ENV_OPERATOR_VERSION = "OPERATOR_VERSION"
PROXY_ENV_NAMES = ["HTTP_PROXY", "HTTPS_PROXY", "NO_PROXY"]

# Container layout
CONFIG_MOUNT_PATH = "/etc/cwagentconfig"
CONFIG_ARG_PREFIX = "/conf"
EXTRA_CONFIG_MOUNT_ROOT = "/var/conf"
RESERVED_CONFIG_ARG = "config"
POD_NAME_ENV = "POD_NAME"

# K8S port naming rules
MAX_PORT_NAME_LEN = 15
MIN_PORT_NUM = 1
MAX_PORT_NUM = 65535

# K8S object naming rules
MAX_DNS_NAME_LEN = 63
MAX_LABEL_VALUE_LEN = 63

# K8S status causes
NAMESPACE_TERMINATING_CAUSE = "NamespaceTerminating"

# Agent modes
MODE_DEPLOYMENT = "deployment"
MODE_DAEMONSET = "daemonset"
MODE_STATEFULSET = "statefulset"
MODE_SIDECAR = "sidecar"

# Labels
MANAGED_BY = "amazon-cloudwatch-agent-operator"
PART_OF = "amazon-cloudwatch-agent"
COMPONENT = "amazon-cloudwatch-agent"
LABEL_MANAGED_BY = "app.kubernetes.io/managed-by"
LABEL_INSTANCE = "app.kubernetes.io/instance"
LABEL_PART_OF = "app.kubernetes.io/part-of"
LABEL_COMPONENT = "app.kubernetes.io/component"
LABEL_NAME = "app.kubernetes.io/name"

# Event types
EVENT_NORMAL = "Normal"

# Default ports exposed by the CloudWatch agent container: (name, port, protocol)
CLOUDWATCH_AGENT_PORTS = [
    ("emf-tcp", 25888, "TCP"),
    ("emf-udp", 25888, "UDP"),
    ("statsd", 8125, "UDP"),
    ("collectd", 25826, "UDP"),
    ("xray-proxy", 2000, "TCP"),
    ("xray-traces", 2000, "UDP"),
    ("otlp-grpc", 4317, "TCP"),
    ("otlp-http", 4318, "TCP"),
    ("appsignals-grpc", 4315, "TCP"),
    ("appsignals-http", 4316, "TCP"),
    ("appsignals-server", 4311, "TCP"),
]
