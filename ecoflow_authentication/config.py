# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Configuration providers.

Step inputs flagged "from environment" hold the *name* of a variable; the value
is looked up through a ``ConfigProvider`` at call time so tests can substitute
a static mapping for the process environment.
"""

import os
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

PACKAGE_NAME = "ecoflow-authentication"

# Shared secret used when an RS* signing key file cannot be found.
TOKEN_SALT_ENV = "ECOFLOW_SYS_TOKEN_SALT"


class ConfigProvider(ABC):
    """Source of named values such as environment variables."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value named ``key``, or ``default`` when unset."""


class EnvConfigProvider(ConfigProvider):
    """Reads the process environment, or an injected mapping."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key, default)


class StaticConfigProvider(ConfigProvider):
    """Serves values from a dict (useful for tests)."""

    def __init__(self, config: Optional[Mapping[str, Any]] = None):
        self._config = config if config is not None else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)
