# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Key material resolution for signing and verification.

A key reference names where key material comes from: an inline value, an
environment variable, a file on disk or a remote JWKS endpoint. Each variant
resolves itself; ``resolve_signing_key`` adds the algorithm policy used when
signing tokens.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from .config import TOKEN_SALT_ENV, ConfigProvider
from .jwks import RemoteKeyProvider, fetch_jwk_public_key
from .logger import Logger


class Algorithm(str, Enum):
    """Signing algorithms offered by the steps."""

    HS256 = "HS256"
    HS384 = "HS384"
    RS256 = "RS256"
    RS384 = "RS384"

    @property
    def is_symmetric(self) -> bool:
        return self in (Algorithm.HS256, Algorithm.HS384)

    @property
    def symmetric_counterpart(self) -> "Algorithm":
        if self.is_symmetric:
            return self
        return Algorithm.HS384 if self is Algorithm.RS384 else Algorithm.HS256


class KeyReference(ABC):
    """Where key material comes from."""

    @abstractmethod
    def resolve(self, env: ConfigProvider) -> Any:
        """Produce the key material, or None when the source is empty."""


@dataclass(frozen=True)
class InlineKey(KeyReference):
    value: str

    def resolve(self, env: ConfigProvider) -> str | None:
        return self.value or None


@dataclass(frozen=True)
class EnvironmentKey(KeyReference):
    name: str

    def resolve(self, env: ConfigProvider) -> str | None:
        return env.get(self.name) if self.name else None


@dataclass(frozen=True)
class FileKey(KeyReference):
    """A key stored in a regular file, read as raw bytes."""

    path: str

    def exists(self) -> bool:
        return bool(self.path) and Path(self.path).is_file()

    def resolve(self, env: ConfigProvider) -> bytes | None:
        if not self.exists():
            return None
        return Path(self.path).read_bytes()


@dataclass(frozen=True)
class RemoteKey(KeyReference):
    """A JWKS endpoint whose URL is itself given by another reference."""

    url: KeyReference

    def resolve(self, env: ConfigProvider) -> RemoteKeyProvider | None:
        url = self.url.resolve(env)
        return fetch_jwk_public_key(url) if url else None


def key_reference(value: str | None, from_environment: Any = False) -> KeyReference:
    """Build the reference described by a step input and its env checkbox.

    Used for keys and for any other input that may name an env variable,
    such as OAuth client credentials.
    """
    if from_environment:
        return EnvironmentKey(value or "")
    return InlineKey(value or "")


def resolve_signing_key(
    algorithm: Algorithm | str,
    key: str | None,
    env: ConfigProvider,
    logger: Logger | None = None,
) -> tuple[str | bytes | None, Algorithm]:
    """Resolve key material and the effective algorithm for signing.

    Symmetric algorithms use ``key`` as the secret. Asymmetric algorithms treat
    ``key`` as the path of a PEM private key. When that file does not exist the
    process-wide ``ECOFLOW_SYS_TOKEN_SALT`` secret is used instead and the
    algorithm is downgraded to its HMAC counterpart (RS256->HS256, RS384->HS384).

    Args:
        algorithm: Requested algorithm
        key: Secret value or private key path
        env: Provider for the fallback secret
        logger: Receives a warning when the downgrade happens

    Returns:
        Tuple of (key material, effective algorithm)

    Raises:
        ValueError: If ``algorithm`` is not supported
        OSError: If the key file exists but cannot be read
    """
    algorithm = Algorithm(algorithm)
    if algorithm.is_symmetric:
        return key, algorithm

    key_file = FileKey(key or "")
    if key_file.exists():
        return key_file.resolve(env), algorithm

    downgraded = algorithm.symmetric_counterpart
    if logger is not None:
        logger.warning(
            "Private key file not found, signing with shared secret",
            requested_algorithm=algorithm.value,
            effective_algorithm=downgraded.value,
        )
    return env.get(TOKEN_SALT_ENV), downgraded
