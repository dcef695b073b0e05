# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Authenticate JWT step: verify the request's bearer token."""

import jwt
from starlette import status

from ..context import DEFAULT_RESPONSE_KEY, EcoContext, StepResult
from ..jwt_manager import verify_token
from ..keys import RemoteKey, key_reference

INVALID_AUTHORIZATION = "Invalid authorization"


def authenticate_token_controller(ctx: EcoContext) -> StepResult:
    """Verify ``Authorization: Bearer <token>`` and store the claims.

    Inputs:
        responseKey: Payload key receiving the claims or the error message
        algorithm: The only algorithm the token may be signed with
        secretORprivateKeySelector: "secret" for an HMAC secret, "publicKey"
            for a JWKS endpoint URL
        secretORpublicKey: The secret or the JWKS URL
        fromEnvironmentVariable: Read the above from that env variable

    Any failure stores a message, sets 401 and halts the pipeline.
    """
    if ctx.inputs is None:
        return StepResult.HALT

    inputs = ctx.inputs
    response_key = inputs.get("responseKey") or DEFAULT_RESPONSE_KEY

    authorization = ctx.headers.get("authorization")
    if not authorization:
        return ctx.fail(response_key, INVALID_AUTHORIZATION, status.HTTP_401_UNAUTHORIZED)

    parts = authorization.split()
    raw_token = parts[1] if len(parts) > 1 else ""
    if not raw_token:
        return ctx.fail(response_key, INVALID_AUTHORIZATION, status.HTTP_401_UNAUTHORIZED)

    reference = key_reference(inputs.get("secretORpublicKey"), inputs.get("fromEnvironmentVariable"))
    if inputs.get("secretORprivateKeySelector", "secret") != "secret":
        reference = RemoteKey(reference)

    try:
        claims = verify_token(raw_token, reference.resolve(ctx.env), inputs.get("algorithm"))
    except (jwt.PyJWTError, ValueError) as e:
        ctx.logger.debug("JWT verification failed", error=str(e))
        return ctx.fail(response_key, str(e), status.HTTP_401_UNAUTHORIZED)

    ctx.payload[response_key] = claims
    return StepResult.NEXT
