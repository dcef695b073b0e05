# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""EcoFlow Authentication package.

Pipeline steps for signing and verifying JSON Web Tokens, publishing a JWKS
public key, and authenticating users with Google OAuth2.
"""

__version__ = "0.1.0"

from .config import ConfigProvider, EnvConfigProvider, StaticConfigProvider
from .context import EcoContext, StepResult
from .controllers import CONTROLLERS
from .google_provider import GoogleOAuthClient
from .jwks import fetch_jwk_public_key
from .jwt_manager import pem_to_jwk, sign_token, verify_token
from .keys import Algorithm, resolve_signing_key
from .logger import Logger, SilentLogger, StdoutLogger, create_logger
from .manifest import ModuleManifest, build_manifest
from .models import OAuthCredentials, TokenSet
from .module_configs import ModuleConfig, ModuleConfigs
from .provider import AuthenticationError, OAuthClient, ProviderError

__all__ = [
    # Version
    "__version__",
    # Host contract
    "EcoContext",
    "StepResult",
    "CONTROLLERS",
    "ModuleManifest",
    "build_manifest",
    "ModuleConfig",
    "ModuleConfigs",
    # Configuration
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    # Logging
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    # JWT
    "Algorithm",
    "resolve_signing_key",
    "fetch_jwk_public_key",
    "sign_token",
    "verify_token",
    "pem_to_jwk",
    # OAuth
    "OAuthClient",
    "GoogleOAuthClient",
    "OAuthCredentials",
    "TokenSet",
    # Exceptions
    "AuthenticationError",
    "ProviderError",
]
