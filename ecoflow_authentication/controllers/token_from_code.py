# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Get Token From Code step."""

from starlette import status

from ..context import EcoContext, StepResult
from ..provider import AuthenticationError, ProviderError
from ._oauth import MSG_KEY, ConfigLookupError, error_payload, lookup_oauth_client


def _authorization_code(ctx: EcoContext) -> str | None:
    inputs = ctx.inputs or {}
    if inputs.get("passByPayload"):
        source = ctx.payload.get(inputs.get("payloadKey") or MSG_KEY)
        return source.get("code") if isinstance(source, dict) else None
    return inputs.get("code") or ctx.query.get("code")


def get_token_from_code(ctx: EcoContext) -> StepResult:
    """Exchange an authorization code using a named OAuth client.

    The code comes from ``payload[payloadKey]["code"]`` when ``passByPayload``
    is set, otherwise from the ``code`` input or the ``code`` query parameter.
    """
    inputs = ctx.inputs
    if not inputs:
        return ctx.fail(MSG_KEY, error_payload("Missing inputs."), status.HTTP_400_BAD_REQUEST)

    client = inputs.get("client")
    if not client:
        return ctx.fail(
            MSG_KEY,
            error_payload(
                "Missing client.",
                status={
                    "client": "client" not in inputs,
                    "code": "code" not in inputs,
                    "passByPayload": "passByPayload" not in inputs,
                    "payloadKey": "payloadKey" not in inputs,
                },
            ),
            status.HTTP_400_BAD_REQUEST,
        )

    try:
        oauth_client = lookup_oauth_client(ctx, client)
    except ConfigLookupError as e:
        return ctx.fail(MSG_KEY, error_payload(str(e)), status.HTTP_400_BAD_REQUEST)

    code = _authorization_code(ctx)
    if not code:
        return ctx.fail(MSG_KEY, error_payload("Missing authorization code."), status.HTTP_400_BAD_REQUEST)

    try:
        tokens = oauth_client.exchange_code(code)
    except (AuthenticationError, ProviderError) as e:
        ctx.logger.error("Failed to exchange authorization code", client=client, error=str(e))
        return ctx.fail(
            MSG_KEY,
            error_payload(f"Failed to get token from code: {code}", rawError=str(e)),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    ctx.payload[MSG_KEY] = {
        "success": True,
        "token": tokens.to_payload(),
        "accessToken": tokens.access_token,
        "refreshToken": tokens.refresh_token,
    }
    return StepResult.NEXT
