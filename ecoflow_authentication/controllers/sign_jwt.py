# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""SignJWT step: sign part of the payload as a JWT."""

from ..context import DEFAULT_RESPONSE_KEY, EcoContext, StepResult
from ..jwt_manager import sign_token
from ..keys import key_reference, resolve_signing_key


def sign_jwt_controller(ctx: EcoContext) -> StepResult:
    """Sign ``payload[payloadKey]`` and store the token under ``responseKey``.

    Inputs:
        payloadKey: Payload key holding the claims (``{}`` when absent)
        responseKey: Payload key receiving the token (default ``msg``)
        expiresIn: Token lifetime, e.g. ``"1hr"``
        algorithm: HS256, HS384, RS256 or RS384
        secretORprivateKey: HMAC secret, or private key path for RS*
        secretORprivateKeyFromEnvironment: Read the above from that env variable

    Signing errors are not caught; they reach the host.
    """
    if ctx.inputs is None:
        return StepResult.HALT

    inputs = ctx.inputs
    payload_key = inputs.get("payloadKey")
    response_key = inputs.get("responseKey") or DEFAULT_RESPONSE_KEY

    claims = ctx.payload.get(payload_key) or {}

    key = key_reference(
        inputs.get("secretORprivateKey"),
        inputs.get("secretORprivateKeyFromEnvironment"),
    ).resolve(ctx.env)
    secret, algorithm = resolve_signing_key(
        inputs.get("algorithm"), key or "", ctx.env, logger=ctx.logger
    )

    ctx.payload[response_key] = sign_token(
        claims, secret, algorithm, expires_in=inputs.get("expiresIn")
    )
    ctx.logger.debug("JWT signed", algorithm=algorithm.value, response_key=response_key)
    return StepResult.NEXT
