# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Abstract OAuth client interface.

Controllers depend only on this interface, so the HTTP library and provider
behind it can change without touching controller logic.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from .models import TokenSet


class OAuthClient(ABC):
    """Operations the OAuth flow controllers need from a provider."""

    @abstractmethod
    def generate_auth_url(
        self,
        access_type: Optional[str] = None,
        scope: Optional[Sequence[str] | str] = None,
        prompt: Optional[str] = None,
        state: Optional[str] = None,
        login_hint: Optional[str] = None,
    ) -> str:
        """Build the provider's authorization URL. No network call is made."""

    @abstractmethod
    def exchange_code(self, code: str) -> TokenSet:
        """Exchange an authorization code for tokens.

        Raises:
            AuthenticationError: If the provider rejects the code
            ProviderError: If the provider is unavailable or replies with a malformed body
        """

    @abstractmethod
    def fetch_user_info(self, access_token: str) -> dict[str, Any]:
        """Fetch the profile of the user an access token belongs to."""

    @abstractmethod
    def refresh_and_fetch_user_info(self, refresh_token: str) -> dict[str, Any]:
        """Obtain a fresh access token and fetch the user's profile.

        Implementations must not keep the credentials once the call returns.
        """


class AuthenticationError(Exception):
    """Raised when the provider rejects a code or token."""
    pass


class ProviderError(Exception):
    """Raised when the provider service is unavailable."""
    pass
