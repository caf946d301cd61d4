"""Authenticated request orchestration."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from bergx_sdk.auth import (
    CredentialRefreshHandler,
    ExpiryEvaluator,
    LoggingRefreshHandler,
    TokenAcquirer,
)
from bergx_sdk.domain import ClientCredential, RouteDescriptor, Scope, UserCredential
from bergx_sdk.exceptions import AuthenticationRequired, RefreshError, RequestFailed
from bergx_sdk.transport import HttpTransport, is_success

from .completion import CompletionWaiter, pending_event_ids


def _consume_outcome(task: asyncio.Future[ClientCredential]) -> None:
    # Marks a failure as retrieved even when every waiter was cancelled.
    if not task.cancelled():
        task.exception()


class RequestOrchestrator:
    """Ensures a live credential for every call, dispatches it and waits on follow-up work.

    The client credential is the only state shared between calls. When it is
    missing or expired, the first caller starts a single acquisition and any
    concurrent caller awaits that same task.
    """

    def __init__(
        self,
        transport: HttpTransport,
        acquirer: TokenAcquirer,
        *,
        expiry: ExpiryEvaluator | None = None,
        refresh_handler: CredentialRefreshHandler | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._transport = transport
        self._acquirer = acquirer
        self._expiry = expiry or ExpiryEvaluator()
        self._logger = logger or logging.getLogger(__name__)
        self._refresh_handler = refresh_handler or LoggingRefreshHandler(self._logger)
        self._waiter = CompletionWaiter(self, logger=self._logger)
        self._client_credential: ClientCredential | None = None
        self._pending_acquisition: asyncio.Future[ClientCredential] | None = None

    @property
    def client_credential(self) -> ClientCredential | None:
        return self._client_credential

    async def ensure_user_token(
        self,
        access_token: str | None,
        refresh_token: str | None,
    ) -> str:
        """Return ``access_token`` if it is live, otherwise refresh it exactly once."""

        if access_token and not self._expiry.is_expired(access_token):
            return access_token

        if not refresh_token:
            msg = "User access token is missing or expired and no refresh token was supplied"
            raise AuthenticationRequired(msg)

        try:
            new_token = await self._acquirer.refresh_user_token(refresh_token)
        except RefreshError as exc:
            msg = "Refresh token is invalid; the user must sign in again"
            raise AuthenticationRequired(msg, body=exc.body) from exc

        user_sub = self._expiry.subject(new_token)
        self._logger.info("Refreshed access token for user %r", user_sub)
        self._refresh_handler.on_credential_refresh(user_sub, new_token)
        return new_token

    async def ensure_client_token(self) -> str:
        """Return a live client access token, acquiring one when needed."""

        credential = self._client_credential
        if credential is not None and not self._expiry.is_expired(credential.access_token):
            return credential.access_token
        credential = await self._shared_acquisition()
        return credential.access_token

    async def renew_client_token(self) -> str:
        """Replace the cached client credential regardless of its expiry."""

        credential = await self._shared_acquisition()
        return credential.access_token

    async def _shared_acquisition(self) -> ClientCredential:
        pending = self._pending_acquisition
        if pending is None:
            pending = asyncio.ensure_future(self._acquire_client_credential())
            pending.add_done_callback(_consume_outcome)
            self._pending_acquisition = pending
        else:
            self._logger.debug("Joining in-flight client credential acquisition")
        return await asyncio.shield(pending)

    async def _acquire_client_credential(self) -> ClientCredential:
        try:
            credential = await self._acquirer.acquire_client_token()
            self._client_credential = credential
            return credential
        finally:
            self._pending_acquisition = None

    async def dispatch(
        self,
        route: RouteDescriptor,
        *,
        user: UserCredential | None = None,
    ) -> Any:
        """Perform ``route`` with the credential its scope calls for and return the decoded body."""

        token = await self._resolve_token(route, user)
        payload = await self._send(route, token)

        if route.await_completion:
            event_ids = pending_event_ids(payload)
            if event_ids:
                self._logger.debug(
                    "%s %s returned pending events %s",
                    route.method.value,
                    route.path,
                    ", ".join(event_ids),
                )
                await self._waiter.wait_for_completion(event_ids, result=payload)
        return payload

    async def _resolve_token(
        self,
        route: RouteDescriptor,
        user: UserCredential | None,
    ) -> str | None:
        if route.scope is Scope.UNAUTHENTICATED:
            return None
        if route.scope is Scope.CLIENT:
            return await self.ensure_client_token()
        if user is None:
            msg = f"{route.method.value} {route.path} requires user credentials"
            raise AuthenticationRequired(msg)
        return await self.ensure_user_token(user.access_token, user.refresh_token)

    async def _send(self, route: RouteDescriptor, token: str | None) -> Any:
        method = route.method.value
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            response = await self._transport.send(
                method,
                route.path,
                json=route.body,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            msg = f"{method} {route.path} failed: {exc}"
            raise RequestFailed(msg, method=method, path=route.path, body=str(exc)) from exc

        if not is_success(response):
            msg = f"{method} {route.path} failed with status {response.status_code}"
            raise RequestFailed(
                msg,
                method=method,
                path=route.path,
                status_code=response.status_code,
                body=response.text,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            msg = f"{method} {route.path} returned a body that is not JSON"
            raise RequestFailed(
                msg,
                method=method,
                path=route.path,
                status_code=response.status_code,
                body=response.text,
            ) from exc


__all__ = ["RequestOrchestrator"]
