# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""ApiCredentials configuration step.

Turns client id, secret and redirect URI into an OAuth client. The host stores
the result under a name chosen by the user; the Get Token From Code and Get
User Details steps look it up by that name.
"""

from typing import Any, Optional

from ..google_provider import GoogleOAuthClient
from ..logger import Logger, create_logger


def api_credentials_controller(
    inputs: Optional[dict[str, Any]],
    logger: Optional[Logger] = None,
) -> Optional[GoogleOAuthClient]:
    """Build a Google OAuth client, or return None if inputs are incomplete."""
    logger = logger or create_logger(name="ecoflow_authentication")

    if not inputs:
        logger.error("Missing inputs.")
        return None

    client_id = inputs.get("clientId")
    client_secret = inputs.get("clientSecret")

    if not client_id:
        logger.error("Missing client ID.")
        return None

    if not client_secret:
        logger.error("Missing client secret.")
        return None

    return GoogleOAuthClient(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=inputs.get("redirectUri") or None,
    )
