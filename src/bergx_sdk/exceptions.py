"""Exceptions raised by the Bergx SDK."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class BergxError(RuntimeError):
    """Base class for every failure surfaced by the SDK."""


class ConfigurationError(BergxError):
    """Raised when the client is constructed without usable settings."""


class InvalidRouteError(BergxError):
    """Raised when a route cannot be built from the given path parameters."""


class AuthError(BergxError):
    """Base class for credential acquisition failures."""

    def __init__(self, message: str, *, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


class RefreshError(AuthError):
    """Raised when the refresh-token exchange is rejected or cannot be performed."""


class ClientAuthError(AuthError):
    """Raised when the client-credentials exchange fails."""


class AuthenticationRequired(AuthError):
    """Raised when the end user has to sign in again out of band."""


class RequestFailed(BergxError):
    """Raised when a business call returns a non-2xx status or never completes."""

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body


class CompletionWaitFailed(BergxError):
    """Raised when a mutation succeeded but its follow-up work could not be confirmed.

    ``result`` holds the body of the original call, which has already taken
    effect on the service.
    """

    def __init__(
        self,
        message: str,
        *,
        event_ids: Sequence[str],
        result: Any = None,
    ) -> None:
        super().__init__(message)
        self.event_ids = tuple(event_ids)
        self.result = result


__all__ = [
    "AuthError",
    "AuthenticationRequired",
    "BergxError",
    "ClientAuthError",
    "CompletionWaitFailed",
    "ConfigurationError",
    "InvalidRouteError",
    "RefreshError",
    "RequestFailed",
]
