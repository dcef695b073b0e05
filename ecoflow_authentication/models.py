# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""OAuth data models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class OAuthCredentials(BaseModel):
    """Client registration for an OAuth provider.

    Attributes:
        client_id: OAuth client ID
        client_secret: OAuth client secret
        redirect_uri: Callback URL registered with the provider
    """
    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str
    redirect_uri: Optional[str] = None

    @field_validator("client_id", "client_secret")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value


class TokenSet(BaseModel):
    """Token endpoint response. Unknown fields are kept."""
    model_config = ConfigDict(extra="allow")

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None
    id_token: Optional[str] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
