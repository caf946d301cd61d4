"""Handlers notified when a user access token has been refreshed."""

from __future__ import annotations

import logging
from typing import Protocol


class CredentialRefreshHandler(Protocol):
    """Receives the replacement access token so the caller can persist it."""

    def on_credential_refresh(self, user_sub: str, access_token: str) -> None:
        """Called synchronously right after a successful refresh."""


class LoggingRefreshHandler:
    """Default handler: nothing persists the token, so warn about it."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def on_credential_refresh(self, user_sub: str, access_token: str) -> None:
        self._logger.warning(
            "Access token refreshed for user %r but no refresh handler is configured",
            user_sub,
        )


__all__ = ["CredentialRefreshHandler", "LoggingRefreshHandler"]
