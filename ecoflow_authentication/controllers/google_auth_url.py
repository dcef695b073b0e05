# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Generate Google Auth URL step."""

from typing import Callable

from starlette import status

from ..context import EcoContext, StepResult
from ..google_provider import GoogleOAuthClient
from ..models import OAuthCredentials
from ..provider import OAuthClient
from ._oauth import MSG_KEY, missing_credentials_payload, resolve_client_credentials


def generate_google_auth_url(
    ctx: EcoContext,
    client_factory: Callable[[OAuthCredentials], OAuthClient] = GoogleOAuthClient.from_credentials,
) -> StepResult:
    """Store ``{"authURL": ...}`` under ``msg``.

    Client credentials, ``access_type`` and ``prompt`` are required; ``scope``,
    ``state`` and ``login_hint`` are passed through when set.
    """
    if ctx.inputs is None:
        return StepResult.HALT

    inputs = ctx.inputs
    credentials, missing = resolve_client_credentials(inputs, ctx.env)
    if credentials is None:
        return ctx.fail(MSG_KEY, missing_credentials_payload(missing), status.HTTP_400_BAD_REQUEST)

    access_type = inputs.get("access_type")
    prompt = inputs.get("prompt")
    if not access_type or not prompt:
        return ctx.fail(
            MSG_KEY,
            {
                "error": True,
                "message": "Missing required Google OAuth parameters",
                "statusCode": 400,
                "missing": {
                    "access_type": not access_type,
                    "prompt": not prompt,
                },
            },
            status.HTTP_400_BAD_REQUEST,
        )

    auth_url = client_factory(credentials).generate_auth_url(
        access_type=access_type,
        scope=inputs.get("scope"),
        prompt=prompt,
        state=inputs.get("state"),
        login_hint=inputs.get("login_hint"),
    )

    ctx.payload[MSG_KEY] = {"authURL": auth_url}
    return StepResult.NEXT
