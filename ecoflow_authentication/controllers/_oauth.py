# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Helpers shared by the Google OAuth controllers."""

from typing import Any, Optional

from ..config import PACKAGE_NAME, ConfigProvider
from ..context import DEFAULT_RESPONSE_KEY, EcoContext
from ..keys import key_reference
from ..models import OAuthCredentials
from ..provider import OAuthClient

# OAuth steps always report through this payload key.
MSG_KEY = DEFAULT_RESPONSE_KEY


class ConfigLookupError(Exception):
    """Raised when a named OAuth client configuration cannot be used."""
    pass


def _blank(value: Any) -> bool:
    return not value or not str(value).strip()


def resolve_client_credentials(
    inputs: dict[str, Any],
    env: ConfigProvider,
) -> tuple[Optional[OAuthCredentials], dict[str, bool]]:
    """Read client id, secret and redirect URI, each optionally from env.

    Returns:
        Tuple of (credentials or None, per-field missing flags)
    """
    client_id = key_reference(inputs.get("clientId"), inputs.get("clientIdFromEnv")).resolve(env)
    client_secret = key_reference(inputs.get("clientSecret"), inputs.get("clientSecretFromEnv")).resolve(env)
    redirect_uri = key_reference(inputs.get("redirectUri"), inputs.get("redirectUriFromEnv")).resolve(env)

    missing = {
        "clientId": _blank(client_id),
        "clientSecret": _blank(client_secret),
        "redirectUri": _blank(redirect_uri),
    }
    if any(missing.values()):
        return None, missing

    return OAuthCredentials(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=redirect_uri,
    ), missing


def missing_credentials_payload(missing: dict[str, bool]) -> dict[str, Any]:
    return {
        "error": True,
        "message": "Missing required Google OAuth client credentials",
        "statusCode": 400,
        "missing": missing,
    }


def lookup_oauth_client(ctx: EcoContext, name: str) -> OAuthClient:
    """Find the OAuth client registered under ``name`` by an ApiCredentials step.

    Raises:
        ConfigLookupError: With the message to report to the caller
    """
    config_manager = ctx.module_configs.select_package(PACKAGE_NAME) if ctx.module_configs else None
    if config_manager is None:
        raise ConfigLookupError(f"Missing configs manager for {PACKAGE_NAME} package")

    config = config_manager.get(name)
    if config is None:
        raise ConfigLookupError(f"Missing config for {PACKAGE_NAME} package")

    if not isinstance(config.configs, OAuthClient):
        raise ConfigLookupError("Missing OAuth client")

    return config.configs


def error_payload(message: str, **fields: Any) -> dict[str, Any]:
    return {"error": True, "message": message, **fields}
