# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Per-invocation context handed to controllers by the host.

The host owns sequencing: a controller mutates ``payload`` and ``status`` and
returns a ``StepResult`` telling the host whether to run the next step.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from starlette import status as http_status
from starlette.requests import Request

from .config import ConfigProvider, EnvConfigProvider
from .logger import Logger, create_logger
from .module_configs import ModuleConfigs

# Payload key written when a step has no responseKey configured.
DEFAULT_RESPONSE_KEY = "msg"


class StepResult(str, Enum):
    """Outcome of a controller invocation."""

    NEXT = "next"
    HALT = "halt"


@dataclass
class EcoContext:
    """Mutable state for one pipeline step invocation.

    Attributes:
        payload: Map shared by every step of the pipeline
        inputs: Step configuration, shaped by the manifest; None if unconfigured
        request: Incoming HTTP request, when the pipeline was triggered by one
        status: Response status code the host will send
        env: Source for inputs flagged "from environment"
        module_configs: Host store of named configurations
        logger: Logger for this invocation
    """
    payload: dict[str, Any] = field(default_factory=dict)
    inputs: Optional[dict[str, Any]] = None
    request: Optional[Request] = None
    status: int = http_status.HTTP_200_OK
    env: ConfigProvider = field(default_factory=EnvConfigProvider)
    module_configs: Optional[ModuleConfigs] = None
    logger: Logger = field(default_factory=lambda: create_logger(name="ecoflow_authentication"))

    def fail(self, key: str, value: Any, status_code: int) -> StepResult:
        """Write ``value`` under ``key``, set the status, and halt the pipeline."""
        self.payload[key] = value
        self.status = status_code
        return StepResult.HALT

    @property
    def headers(self) -> dict[str, str]:
        if self.request is None:
            return {}
        return dict(self.request.headers)

    @property
    def query(self) -> dict[str, str]:
        if self.request is None:
            return {}
        return dict(self.request.query_params)
