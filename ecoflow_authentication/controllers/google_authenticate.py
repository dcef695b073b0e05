# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Google Authenticate step.

Mounted as the OAuth redirect target: reads ``code`` from the query string,
exchanges it and fetches the user profile in one call, without a registered
client configuration.
"""

from typing import Callable

from starlette import status

from ..context import EcoContext, StepResult
from ..google_provider import GoogleOAuthClient
from ..models import OAuthCredentials
from ..provider import AuthenticationError, OAuthClient, ProviderError
from ._oauth import MSG_KEY, missing_credentials_payload, resolve_client_credentials


def google_oauth_authenticate(
    ctx: EcoContext,
    client_factory: Callable[[OAuthCredentials], OAuthClient] = GoogleOAuthClient.from_credentials,
) -> StepResult:
    if ctx.inputs is None:
        return StepResult.HALT

    credentials, missing = resolve_client_credentials(ctx.inputs, ctx.env)
    if credentials is None:
        return ctx.fail(MSG_KEY, missing_credentials_payload(missing), status.HTTP_400_BAD_REQUEST)

    code = ctx.query.get("code")
    if not code:
        return ctx.fail(
            MSG_KEY,
            {
                "error": True,
                "message": "Missing Google OAuth authorization code",
                "statusCode": 400,
            },
            status.HTTP_400_BAD_REQUEST,
        )

    oauth_client = client_factory(credentials)
    try:
        tokens = oauth_client.exchange_code(code)
        if not tokens.access_token:
            raise AuthenticationError("Token response has no access token")
        user_info = oauth_client.fetch_user_info(tokens.access_token)
    except (AuthenticationError, ProviderError) as e:
        ctx.logger.error("Google OAuth authentication failed", error=str(e))
        return ctx.fail(
            MSG_KEY,
            {
                "error": True,
                "message": "Google OAuth authentication failed",
                "statusCode": 500,
                "rawError": str(e),
            },
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    ctx.payload[MSG_KEY] = {
        "error": False,
        "message": "Google OAuth authentication successful",
        "statusCode": 200,
        "user": user_info,
    }
    return StepResult.NEXT
