# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Get User Details step."""

from starlette import status

from ..context import EcoContext, StepResult
from ..provider import AuthenticationError, ProviderError
from ._oauth import MSG_KEY, ConfigLookupError, error_payload, lookup_oauth_client


def get_user_details(ctx: EcoContext) -> StepResult:
    """Fetch the Google profile for a refresh token using a named OAuth client.

    The refresh token is the ``refreshToken`` input, or the query parameter
    named by ``queryKey`` (default ``token``) when ``passByQuery`` is set.
    """
    inputs = ctx.inputs
    if not inputs:
        return ctx.fail(MSG_KEY, error_payload("Missing inputs."), status.HTTP_400_BAD_REQUEST)

    client = inputs.get("client")
    if not client:
        return ctx.fail(
            MSG_KEY,
            error_payload("Missing client.", status={"client": "client" not in inputs}),
            status.HTTP_400_BAD_REQUEST,
        )

    if inputs.get("passByQuery"):
        refresh_token = ctx.query.get(inputs.get("queryKey") or "token")
    else:
        refresh_token = inputs.get("refreshToken")

    try:
        oauth_client = lookup_oauth_client(ctx, client)
    except ConfigLookupError as e:
        return ctx.fail(MSG_KEY, error_payload(str(e)), status.HTTP_400_BAD_REQUEST)

    if not refresh_token:
        return ctx.fail(MSG_KEY, error_payload("Missing refresh token."), status.HTTP_400_BAD_REQUEST)

    try:
        user_info = oauth_client.refresh_and_fetch_user_info(refresh_token)
    except (AuthenticationError, ProviderError) as e:
        ctx.logger.error("Failed to get user details", client=client, error=str(e))
        return ctx.fail(
            MSG_KEY,
            error_payload("Failed to get user details.", rawError=str(e)),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    ctx.payload[MSG_KEY] = {"success": True, "user": user_info}
    return StepResult.NEXT
