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

import json
import logging.config
from typing import Optional, Union, Dict

import yaml

from .constants.constants import CWAGENT_OPERATOR_LOGLEVEL

CWAGENT_OPERATOR_LOGGER_NAME = "cwagent_operator"
CWAGENT_OPERATOR_LOGGER_FORMAT = (
    "%(asctime)s.%(msecs)03d %(process)s %(name)s "
    "%(levelname)s [%(filename)s:%(funcName)s():%(lineno)s] %(message)s"
)
CWAGENT_OPERATOR_LOGGER_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CWAGENT_OPERATOR_LOG_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "cwagent_operator": {
            "()": "logging.Formatter",
            "fmt": CWAGENT_OPERATOR_LOGGER_FORMAT,
            "datefmt": CWAGENT_OPERATOR_LOGGER_DATE_FORMAT,
        },
    },
    "handlers": {
        "cwagent_operator": {
            "formatter": "cwagent_operator",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "cwagent_operator": {
            "handlers": ["cwagent_operator"],
            "level": CWAGENT_OPERATOR_LOGLEVEL,
            "propagate": False,
        },
        "kubernetes": {"level": "WARNING"},
    },
}

logger = logging.getLogger(CWAGENT_OPERATOR_LOGGER_NAME)


def configure_logging(log_config: Optional[Union[Dict, str]] = None):
    """
    Configures the operator loggers.
    This function should be called before the first reconciliation for a consistent logging format.

    :param log_config: (Optional) File path or dict containing log config. If not provided default configuration
                       will be used.
                       - If a dictionary is provided, it will be used directly for configuring the logger.
                       - If a string is provided:
                           - If it ends with '.json', it will be treated as a path to a JSON file containing log
                             configuration.
                           - If it ends with '.yaml' or '.yml', it will be treated as a path to a YAML file containing
                             log configuration.
                           - Otherwise, it will be treated as a path to a configuration file in the format specified in
                             the Python logging module documentation.
    """
    if log_config is None:
        logging.config.dictConfig(CWAGENT_OPERATOR_LOG_CONFIG)
    elif isinstance(log_config, dict):
        logging.config.dictConfig(log_config)
    elif log_config.endswith(".json"):
        with open(log_config) as file:
            loaded_config = json.load(file)
            logging.config.dictConfig(loaded_config)
    elif log_config.endswith((".yaml", ".yml")):
        with open(log_config) as file:
            loaded_config = yaml.safe_load(file)
            logging.config.dictConfig(loaded_config)
    else:
        # See the note about fileConfig() here:
        # https://docs.python.org/3/library/logging.config.html#configuration-file-format
        logging.config.fileConfig(log_config, disable_existing_loggers=False)


class ResourceLoggerAdapter(logging.LoggerAdapter):
    """Prefixes each message with the identity of the reconciled resource."""

    def __init__(self, logger, namespace: str, name: str):
        super().__init__(logger, {"amazoncloudwatchagent": f"{namespace}/{name}"})

    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {}).update(self.extra)
        return f"[amazoncloudwatchagent={self.extra['amazoncloudwatchagent']}] {msg}", kwargs
