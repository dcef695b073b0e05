# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Remote JWKS key lookup.

Verification against a JWKS endpoint goes through PyJWT's ``PyJWKClient``.
One client is kept per endpoint URL for the life of the process so its key
cache (50 keys, one hour) is shared by every invocation.
"""

from functools import lru_cache
from typing import Any

import httpx
from jwt import PyJWKClient, PyJWKClientError

JWKS_CACHE_MAX_ENTRIES = 50
JWKS_CACHE_MAX_AGE = 60 * 60  # 1 hour


def is_valid_url(url: Any) -> bool:
    """Check that ``url`` is an absolute, well-formed URL."""
    if not isinstance(url, str) or not url:
        return False
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError):
        return False
    return bool(parsed.scheme) and bool(parsed.host)


@lru_cache(maxsize=64)
def _jwk_client(url: str) -> PyJWKClient:
    return PyJWKClient(
        url,
        cache_keys=True,
        max_cached_keys=JWKS_CACHE_MAX_ENTRIES,
        cache_jwk_set=True,
        lifespan=JWKS_CACHE_MAX_AGE,
    )


class RemoteKeyProvider:
    """Resolves a token header's ``kid`` to a public key from a JWKS endpoint."""

    def __init__(self, url: str, client: PyJWKClient):
        self.url = url
        self.client = client

    def __call__(self, header: dict[str, Any]) -> Any:
        """Return the public key for ``header``.

        Raises:
            PyJWKClientError: If the header has no kid, the endpoint cannot be
                reached, or no key matches
        """
        kid = header.get("kid")
        if not kid:
            raise PyJWKClientError("Token header has no kid")
        return self.client.get_signing_key(kid).key


def fetch_jwk_public_key(url: Any) -> RemoteKeyProvider | None:
    """Build a key provider for a JWKS endpoint.

    Args:
        url: JWKS endpoint URL

    Returns:
        A key provider, or None if ``url`` is not a valid URL
    """
    if not is_valid_url(url):
        return None
    return RemoteKeyProvider(url, _jwk_client(url))


def clear_jwk_clients() -> None:
    """Drop every cached JWKS client (and with them their key caches)."""
    _jwk_client.cache_clear()
