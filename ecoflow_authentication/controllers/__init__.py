# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Pipeline step controllers, keyed by the identifiers used in the manifest."""

from .api_credentials import api_credentials_controller
from .authenticate_token import authenticate_token_controller
from .google_auth_url import generate_google_auth_url
from .google_authenticate import google_oauth_authenticate
from .jwt_jwks import jwt_jwks_controller
from .sign_jwt import sign_jwt_controller
from .token_from_code import get_token_from_code
from .user_details import get_user_details

CONTROLLERS = {
    "ApiCredentialsController": api_credentials_controller,
    "signJWTController": sign_jwt_controller,
    "jwtJWKSController": jwt_jwks_controller,
    "authenticateTokenController": authenticate_token_controller,
    "generateGoogleAuthUrl": generate_google_auth_url,
    "getTokenFromCode": get_token_from_code,
    "getUserDetails": get_user_details,
    "googleOAuthAuthenticate": google_oauth_authenticate,
}

__all__ = [
    "CONTROLLERS",
    "api_credentials_controller",
    "authenticate_token_controller",
    "generate_google_auth_url",
    "google_oauth_authenticate",
    "jwt_jwks_controller",
    "sign_jwt_controller",
    "get_token_from_code",
    "get_user_details",
]
