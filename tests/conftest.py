# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Shared fixtures for ecoflow_authentication tests."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

import pytest
from starlette.requests import Request

from ecoflow_authentication import EcoContext, ModuleConfigs, SilentLogger, StaticConfigProvider
from ecoflow_authentication.jwks import clear_jwk_clients
from ecoflow_authentication.jwt_manager import generate_rsa_keys

LONG_SECRET = "test-secret-key-at-least-48-characters-long-for-hs384!"


def make_request(headers: dict[str, str] | None = None, query: dict[str, str] | None = None) -> Request:
    """Build a starlette request carrying the given headers and query string."""
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
        "query_string": urlencode(query or {}).encode("ascii"),
    }
    return Request(scope)


@pytest.fixture
def logger() -> SilentLogger:
    return SilentLogger()


@pytest.fixture
def token_salt() -> str:
    return LONG_SECRET


@pytest.fixture
def env_vars() -> dict[str, str]:
    """Variables the steps see through ``env``. Tests may add entries."""
    return {"ECOFLOW_SYS_TOKEN_SALT": LONG_SECRET}


@pytest.fixture
def env(env_vars) -> StaticConfigProvider:
    return StaticConfigProvider(env_vars)


@pytest.fixture
def module_configs() -> ModuleConfigs:
    return ModuleConfigs()


@pytest.fixture
def make_context(env, logger, module_configs):
    """Factory for contexts sharing the test's env, logger and config store."""

    def _make(
        inputs: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        query: dict[str, str] | None = None,
    ) -> EcoContext:
        return EcoContext(
            payload=payload if payload is not None else {},
            inputs=inputs,
            request=make_request(headers, query),
            env=env,
            module_configs=module_configs,
            logger=logger,
        )

    return _make


@pytest.fixture(scope="session")
def rsa_key_files(tmp_path_factory):
    """Paths of a PEM private/public key pair generated once per session."""
    key_dir = tmp_path_factory.mktemp("keys")
    private_key_path = key_dir / "private.pem"
    public_key_path = key_dir / "public.pem"
    generate_rsa_keys(private_key_path, public_key_path)
    return private_key_path, public_key_path


@pytest.fixture(autouse=True)
def _fresh_jwk_clients():
    clear_jwk_clients()
    yield
    clear_jwk_clients()
