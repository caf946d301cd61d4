"""High-level Bergx client exposing the profile, switches and bandit operations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from bergx_sdk import routes
from bergx_sdk.auth import CredentialRefreshHandler, ExpiryEvaluator, TokenAcquirer
from bergx_sdk.config import BergxSettings
from bergx_sdk.domain import (
    Clock,
    CohortDefinition,
    Context,
    RouteDescriptor,
    SwitchDefinition,
    TryResponse,
    UserCredential,
    WireModel,
)
from bergx_sdk.exceptions import RequestFailed
from bergx_sdk.orchestration import RequestOrchestrator
from bergx_sdk.transport import HttpTransport

UserLike = UserCredential | Mapping[str, Any]
Payload = WireModel | Mapping[str, Any]


def _payload(data: Payload | None) -> dict[str, Any] | None:
    if data is None:
        return None
    if isinstance(data, WireModel):
        return data.to_payload()
    return dict(data)


def _user(user: UserLike) -> UserCredential:
    if isinstance(user, UserCredential):
        return user
    return UserCredential.model_validate(dict(user))


def _field(payload: Any, name: str, route: RouteDescriptor) -> Any:
    if not isinstance(payload, dict) or name not in payload:
        raise _malformed(route, payload, f"no '{name}' field")
    return payload[name]


def _malformed(route: RouteDescriptor, payload: Any, detail: str) -> RequestFailed:
    msg = f"{route.method.value} {route.path} response has {detail}"
    return RequestFailed(msg, method=route.method.value, path=route.path, body=repr(payload))


class BergxClient:
    """Entry point for applications talking to the Bergx platform.

    Usable directly (a short-lived HTTP connection per call) or as an async
    context manager that keeps one ``httpx.AsyncClient`` open::

        async with BergxClient(settings) as bergx:
            enabled = await bergx.check_switch("beta", {"country": "NL"})
    """

    def __init__(
        self,
        settings: BergxSettings,
        *,
        refresh_handler: CredentialRefreshHandler | None = None,
        http_client: httpx.AsyncClient | None = None,
        clock: Clock | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        settings.require_credentials()
        self._settings = settings
        self._logger = logger or logging.getLogger(__name__)
        self._owned_client: httpx.AsyncClient | None = None
        self._transport = HttpTransport(
            settings.host,
            client=http_client,
            timeout=settings.request_timeout,
        )
        self._expiry = ExpiryEvaluator(clock)
        self._acquirer = TokenAcquirer(
            self._transport,
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            expiry=self._expiry,
            logger=self._logger,
        )
        self._orchestrator = RequestOrchestrator(
            self._transport,
            self._acquirer,
            expiry=self._expiry,
            refresh_handler=refresh_handler,
            logger=self._logger,
        )
        self._has_injected_client = http_client is not None

    @property
    def settings(self) -> BergxSettings:
        return self._settings

    @property
    def orchestrator(self) -> RequestOrchestrator:
        return self._orchestrator

    async def __aenter__(self) -> BergxClient:
        if not self._has_injected_client and self._owned_client is None:
            self._owned_client = httpx.AsyncClient(timeout=self._settings.request_timeout)
            self._transport.bind(self._owned_client)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None
            self._transport.bind(None)

    # Credentials

    async def refresh_access_token(self, refresh_token: str) -> str:
        return await self._acquirer.refresh_user_token(refresh_token)

    async def get_new_client_access_token(self) -> str:
        return await self._orchestrator.renew_client_token()

    # Profile

    async def get_profile(self, user: UserLike) -> Any:
        return await self._orchestrator.dispatch(routes.get_profile(), user=_user(user))

    async def update_profile(self, user: UserLike, data: Mapping[str, Any]) -> Any:
        route = routes.update_profile(dict(data))
        return await self._orchestrator.dispatch(route, user=_user(user))

    # Switches

    async def get_switches(self) -> Any:
        return await self._orchestrator.dispatch(routes.list_switches())

    async def create_switch(self, definition: SwitchDefinition | Mapping[str, Any]) -> Any:
        return await self._orchestrator.dispatch(routes.create_switch(_payload(definition) or {}))

    async def check_switch(self, switch_name: str, context: Context | None = None) -> bool:
        route = routes.check_switch(switch_name, dict(context or {}))
        payload = await self._orchestrator.dispatch(route)
        value = _field(payload, "value", route)
        if not isinstance(value, bool):
            raise _malformed(route, payload, "a non-boolean 'value' field")
        return value

    async def check_all_switches(self, context: Context | None = None) -> dict[str, bool]:
        route = routes.check_all_switches(dict(context or {}))
        payload = await self._orchestrator.dispatch(route)
        switches = _field(payload, "switches", route)
        if not isinstance(switches, dict) or not all(
            isinstance(value, bool) for value in switches.values()
        ):
            raise _malformed(route, payload, "a 'switches' field that is not a boolean map")
        return {str(name): value for name, value in switches.items()}

    async def update_switch(self, switch_name: str, data: Payload) -> Any:
        route = routes.update_switch(switch_name, _payload(data) or {})
        return await self._orchestrator.dispatch(route)

    async def delete_switch(self, switch_name: str) -> Any:
        return await self._orchestrator.dispatch(routes.delete_switch(switch_name))

    # Bandit cohorts

    async def get_bandit_cohorts(self) -> Any:
        return await self._orchestrator.dispatch(routes.list_cohorts())

    async def create_bandit_cohort(self, cohort: CohortDefinition | Mapping[str, Any]) -> Any:
        return await self._orchestrator.dispatch(routes.create_cohort(_payload(cohort) or {}))

    async def update_bandit_cohort(self, cohort_id: str, data: Payload) -> Any:
        route = routes.update_cohort(cohort_id, _payload(data) or {})
        return await self._orchestrator.dispatch(route)

    async def delete_bandit_cohort(self, cohort_id: str) -> Any:
        return await self._orchestrator.dispatch(routes.delete_cohort(cohort_id))

    async def try_bandit_cohort(self, cohort_id: str) -> TryResponse:
        route = routes.try_cohort(cohort_id)
        payload = await self._orchestrator.dispatch(route)
        _field(payload, "armName", route)
        try:
            return TryResponse.model_validate(payload)
        except ValidationError as exc:
            raise _malformed(route, payload, "an unusable 'armName' field") from exc

    async def win_bandit_cohort(self, cohort_id: str, arm_name: str) -> Any:
        return await self._orchestrator.dispatch(routes.win_cohort(cohort_id, arm_name))

    async def reset_bandit_cohort(self, cohort_id: str) -> Any:
        return await self._orchestrator.dispatch(routes.reset_cohort(cohort_id))


__all__ = ["BergxClient"]
