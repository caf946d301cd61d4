"""Credential value objects handled by the orchestrator."""

from __future__ import annotations

from typing import Annotated

from pydantic import AliasChoices, ConfigDict, Field

from .base import DomainModel


class UserCredential(DomainModel):
    """Token pair belonging to an end user, supplied by the caller on every call."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    access_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("access_token", "accessToken"),
    )
    refresh_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("refresh_token", "refreshToken"),
    )


class ClientCredential(DomainModel):
    """Bearer token representing the application itself."""

    access_token: Annotated[str, Field(min_length=1)]
    expires_at: float | None = None


class OAuthTokenResponse(DomainModel):
    """Body returned by the two OAuth endpoints."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    access_token: Annotated[str, Field(min_length=1)] = Field(
        validation_alias=AliasChoices("access_token", "accessToken"),
    )


__all__ = ["ClientCredential", "OAuthTokenResponse", "UserCredential"]
