"""Credential acquisition against the Bergx authorization endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from bergx_sdk.domain import ClientCredential, HttpMethod, OAuthTokenResponse
from bergx_sdk.exceptions import AuthError, ClientAuthError, RefreshError
from bergx_sdk.transport import HttpTransport, is_success

from .expiry import ExpiryEvaluator

REFRESH_PATH = "/oauth/refresh"
TOKEN_PATH = "/oauth/token"


class TokenAcquirer:
    """Performs the refresh-token and client-credentials exchanges.

    These are the only calls that authenticate with ``client_id`` and
    ``client_secret`` in the body instead of a bearer token.
    """

    def __init__(
        self,
        transport: HttpTransport,
        *,
        client_id: str,
        client_secret: str,
        expiry: ExpiryEvaluator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._transport = transport
        self._client_id = client_id
        self._client_secret = client_secret
        self._expiry = expiry or ExpiryEvaluator()
        self._logger = logger or logging.getLogger(__name__)

    async def refresh_user_token(self, refresh_token: str) -> str:
        """Exchange ``refresh_token`` for a new user access token."""

        body = await self._exchange(
            REFRESH_PATH,
            {"grant_type": "refresh_token", "refresh_token": refresh_token},
            RefreshError,
        )
        self._logger.debug("Refreshed user access token via %s", REFRESH_PATH)
        return body.access_token

    async def acquire_client_token(self) -> ClientCredential:
        """Run the client-credentials grant and return the new client credential."""

        body = await self._exchange(
            TOKEN_PATH,
            {"grant_type": "client_credentials"},
            ClientAuthError,
        )
        credential = ClientCredential(
            access_token=body.access_token,
            expires_at=self._expiry.expiry(body.access_token),
        )
        self._logger.info("Acquired client access token for %s", self._client_id)
        return credential

    async def _exchange(
        self,
        path: str,
        grant: dict[str, Any],
        error_type: type[AuthError],
    ) -> OAuthTokenResponse:
        payload = {
            **grant,
            "client_id": self._client_id,
            "client_secret": self._client_secret,
        }
        try:
            response = await self._transport.send(HttpMethod.POST.value, path, json=payload)
        except httpx.HTTPError as exc:
            msg = f"Token exchange against {path} failed: {exc}"
            raise error_type(msg, body=str(exc)) from exc

        if not is_success(response):
            msg = f"Token exchange against {path} failed with status {response.status_code}"
            raise error_type(msg, body=response.text)

        try:
            return OAuthTokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            msg = f"Token exchange against {path} returned no usable access token"
            raise error_type(msg, body=response.text) from exc


__all__ = ["REFRESH_PATH", "TOKEN_PATH", "TokenAcquirer"]
