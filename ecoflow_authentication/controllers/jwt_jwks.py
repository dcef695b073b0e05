# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""JWT JWKS Public Key step: publish a PEM public key as a JWK set."""

from pathlib import Path

from starlette import status

from ..context import DEFAULT_RESPONSE_KEY, EcoContext, StepResult
from ..jwt_manager import pem_to_jwk
from ..keys import key_reference


def jwt_jwks_controller(ctx: EcoContext) -> StepResult:
    """Store ``[jwk]`` for the configured public key under ``responseKey``.

    Responds 404 when the key file is missing and 500 on any other failure.
    """
    if ctx.inputs is None:
        return StepResult.HALT

    inputs = ctx.inputs
    response_key = inputs.get("responseKey") or DEFAULT_RESPONSE_KEY
    key_path = key_reference(inputs.get("publicKey"), inputs.get("fromEnvironmentVariable")).resolve(ctx.env)

    try:
        if not key_path or not Path(key_path).exists():
            return ctx.fail(response_key, "key not found", status.HTTP_404_NOT_FOUND)

        pem = Path(key_path).read_text(encoding="ascii")
        ctx.payload[response_key] = [pem_to_jwk(pem, use="sig")]
    except (OSError, ValueError) as e:
        ctx.logger.exception("Failed to publish JWKS", key_path=key_path, error=str(e))
        return ctx.fail(response_key, "error occurred", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return StepResult.NEXT
