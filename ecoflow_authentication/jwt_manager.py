# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""JWT signing, verification and JWK export.

Thin wrappers over PyJWT and cryptography used by the token controllers.
"""

import base64
import time
from pathlib import Path
from typing import Any, Callable, Mapping, Union

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .keys import Algorithm
from .timespan import parse_timespan

KeyProvider = Callable[[dict[str, Any]], Any]
VerificationKey = Union[str, bytes, KeyProvider, None]


def sign_token(
    payload: Mapping[str, Any],
    key: str | bytes | None,
    algorithm: Algorithm | str,
    expires_in: int | float | str | None = None,
) -> str:
    """Sign ``payload`` as a compact JWT.

    ``iat`` is set to now unless the payload carries one; ``exp`` is ``iat``
    plus ``expires_in`` when given.

    Args:
        payload: Claims to sign
        key: HMAC secret or PEM private key bytes
        algorithm: Signing algorithm
        expires_in: Lifetime in seconds or as a timespan string ("1hr")

    Returns:
        Signed JWT token string

    Raises:
        ValueError: If ``expires_in`` is invalid or the payload already has ``exp``
        jwt.PyJWTError: If PyJWT rejects the key
    """
    claims = dict(payload)
    claims.setdefault("iat", int(time.time()))

    if expires_in is not None and expires_in != "":
        if "exp" in claims:
            raise ValueError('Bad "expires_in" option: the payload already has an "exp" property')
        claims["exp"] = int(claims["iat"]) + parse_timespan(expires_in)

    return jwt.encode(claims, key, algorithm=Algorithm(algorithm).value)


def verify_token(token: str, key: VerificationKey, algorithm: Algorithm | str) -> dict[str, Any]:
    """Verify a JWT's signature and time claims.

    Only ``algorithm`` is accepted, so a token signed with any other algorithm
    is rejected. ``key`` may be a callable that receives the unverified header
    and returns the key (see ``jwks.RemoteKeyProvider``).

    Returns:
        Decoded token claims

    Raises:
        jwt.PyJWTError: If the key is missing or the token is invalid, expired
            or malformed
    """
    if callable(key):
        key = key(jwt.get_unverified_header(token))

    if key is None or key == "" or key == b"":
        raise jwt.InvalidKeyError("secret or public key must be provided")

    return jwt.decode(
        token,
        key,
        algorithms=[Algorithm(algorithm).value],
        options={"verify_aud": False},
    )


def pem_to_jwk(pem: str, **extras: Any) -> dict[str, Any]:
    """Convert an RSA PEM key to a public JWK.

    A private key PEM is accepted; only its public components are exported.

    Args:
        pem: PEM-encoded RSA public or private key
        **extras: Extra JWK members, e.g. ``use="sig"``

    Returns:
        JWK dictionary with ``kty``, ``n``, ``e`` and the extras

    Raises:
        ValueError: If the PEM cannot be parsed or is not an RSA key
    """
    data = pem.encode("ascii")
    try:
        public_key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm):
        try:
            private_key = serialization.load_pem_private_key(data, password=None)
        except (TypeError, UnsupportedAlgorithm) as e:
            raise ValueError(f"Unsupported PEM key: {e}") from e
        if not isinstance(private_key, RSAPrivateKey):
            raise ValueError("Only RSA keys can be exported as JWK")
        public_key = private_key.public_key()

    if not isinstance(public_key, RSAPublicKey):
        raise ValueError("Only RSA keys can be exported as JWK")

    public_numbers = public_key.public_numbers()
    jwk = {
        "kty": "RSA",
        "n": _int_to_base64url(public_numbers.n),
        "e": _int_to_base64url(public_numbers.e),
    }
    jwk.update(extras)
    return jwk


def generate_rsa_keys(
    private_key_path: Path,
    public_key_path: Path,
    key_size: int = 2048,
) -> None:
    """Generate an RSA key pair for RS256/RS384 signing.

    Args:
        private_key_path: Output path for the PKCS8 private key
        public_key_path: Output path for the SubjectPublicKeyInfo public key
        key_size: RSA key size in bits (default: 2048)
    """
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)

    private_key_path.write_bytes(private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ))
    public_key_path.write_bytes(private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ))


def _int_to_base64url(value: int) -> str:
    """Convert integer to base64url-encoded string."""
    byte_length = (value.bit_length() + 7) // 8
    value_bytes = value.to_bytes(byte_length, byteorder="big")
    return base64.urlsafe_b64encode(value_bytes).decode("ascii").rstrip("=")
