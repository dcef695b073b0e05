# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Google OAuth2 client.

Talks to Google's documented OAuth2 endpoints with httpx: builds the consent
URL, exchanges authorization codes, refreshes access tokens and reads the
userinfo endpoint.
"""

from typing import Any, Dict, Optional, Sequence

import httpx

from .models import OAuthCredentials, TokenSet
from .provider import AuthenticationError, OAuthClient, ProviderError

GOOGLE_AUTH_ENDPOINT = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_ENDPOINT = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_ENDPOINT = "https://www.googleapis.com/oauth2/v2/userinfo"


class GoogleOAuthClient(OAuthClient):
    """OAuth client for Google accounts.

    Attributes:
        client_id: Google OAuth client ID
        client_secret: Google OAuth client secret
        redirect_uri: OAuth callback URL
        credentials: Tokens held while a refresh-and-fetch call is running
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        """Initialize the Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: OAuth callback URL
            http_client: Client used for requests. When omitted, each request goes
                through httpx.get/httpx.post, which open and close their own client.
            timeout: Request timeout in seconds
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.credentials: Dict[str, Any] = {}
        self._http_client = http_client
        self._timeout = timeout

    @classmethod
    def from_credentials(
        cls,
        credentials: OAuthCredentials,
        http_client: Optional[httpx.Client] = None,
    ) -> "GoogleOAuthClient":
        return cls(
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
            redirect_uri=credentials.redirect_uri,
            http_client=http_client,
        )

    def generate_auth_url(
        self,
        access_type: Optional[str] = None,
        scope: Optional[Sequence[str] | str] = None,
        prompt: Optional[str] = None,
        state: Optional[str] = None,
        login_hint: Optional[str] = None,
    ) -> str:
        if scope is not None and not isinstance(scope, str):
            scope = " ".join(scope)

        params = {
            "access_type": access_type,
            "scope": scope,
            "prompt": prompt,
            "state": state,
            "login_hint": login_hint,
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
        }
        params = {k: v for k, v in params.items() if v}

        return str(httpx.URL(GOOGLE_AUTH_ENDPOINT, params=params))

    def exchange_code(self, code: str) -> TokenSet:
        return self._request_tokens({
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri or "",
            "grant_type": "authorization_code",
        })

    def refresh_access_token(self, refresh_token: str) -> str:
        """Trade a refresh token for a new access token.

        Raises:
            AuthenticationError: If Google rejects the refresh token or returns no access token
            ProviderError: If the token endpoint is unavailable or replies with a malformed body
        """
        tokens = self._request_tokens({
            "refresh_token": refresh_token,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "refresh_token",
        })
        if not tokens.access_token:
            raise AuthenticationError("Failed to get access token.")
        return tokens.access_token

    def fetch_user_info(self, access_token: str) -> Dict[str, Any]:
        try:
            response = self._get(
                GOOGLE_USERINFO_ENDPOINT,
                params={"alt": "json"},
                headers={"Authorization": f"Bearer {access_token}"},
            )
            response.raise_for_status()
            user_info = response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code < 500:
                raise AuthenticationError(f"Failed to retrieve user info: {e}") from e
            raise ProviderError(f"Userinfo endpoint unavailable: {e}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Userinfo endpoint unavailable: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Malformed userinfo response: {e}") from e

        if not isinstance(user_info, dict):
            raise ProviderError("Malformed userinfo response: expected a JSON object")
        return user_info

    def refresh_and_fetch_user_info(self, refresh_token: str) -> Dict[str, Any]:
        self.credentials = {"refresh_token": refresh_token}
        try:
            access_token = self.refresh_access_token(refresh_token)
            self.credentials["access_token"] = access_token
            return self.fetch_user_info(access_token)
        finally:
            self.credentials = {}

    def _get(self, url: str, **kwargs: Any) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.get(url, **kwargs)
        return httpx.get(url, timeout=self._timeout, **kwargs)

    def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(url, **kwargs)
        return httpx.post(url, timeout=self._timeout, **kwargs)

    def _request_tokens(self, data: Dict[str, str]) -> TokenSet:
        try:
            response = self._post(GOOGLE_TOKEN_ENDPOINT, data=data)
            response.raise_for_status()
            body = response.json()
            if not isinstance(body, dict):
                raise ProviderError("Malformed token response: expected a JSON object")
            return TokenSet(**body)

        except httpx.HTTPStatusError as e:
            if e.response.status_code < 500:
                raise AuthenticationError(f"Token request failed: {e}") from e
            raise ProviderError(f"Token endpoint unavailable: {e}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Token endpoint unavailable: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Malformed token response: {e}") from e
