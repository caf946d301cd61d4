"""Waits for server-side work triggered by a mutating call."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from bergx_sdk.domain import EventId, HttpMethod, RouteDescriptor, Scope
from bergx_sdk.exceptions import BergxError, CompletionWaitFailed

EVENTS_PATH = "/api/v1/events"


class RouteDispatcher(Protocol):
    async def dispatch(self, route: RouteDescriptor) -> Any: ...


def pending_event_ids(payload: Any) -> tuple[EventId, ...]:
    """Extract pending-work markers (``eventIds`` or ``eventId``) from a response body."""

    if not isinstance(payload, dict):
        return ()
    raw = payload.get("eventIds")
    if isinstance(raw, list | tuple):
        ids = tuple(str(item) for item in raw if item)
        if ids:
            return ids
    single = payload.get("eventId")
    if single:
        return (str(single),)
    return ()


class CompletionWaiter:
    """Blocks until the events service confirms the given ids are resolved."""

    def __init__(
        self,
        dispatcher: RouteDispatcher,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._logger = logger or logging.getLogger(__name__)

    async def wait_for_completion(
        self,
        event_ids: Sequence[EventId],
        *,
        result: Any = None,
    ) -> None:
        ids = list(event_ids)
        if not ids:
            return
        route = RouteDescriptor(
            path=EVENTS_PATH,
            method=HttpMethod.POST,
            scope=Scope.CLIENT,
            body={"events": ids},
            await_completion=False,
        )
        try:
            await self._dispatcher.dispatch(route)
        except BergxError as exc:
            self._logger.warning(
                "Could not confirm completion of events %s: %s",
                ", ".join(ids),
                exc,
            )
            msg = f"Completion of events {', '.join(ids)} could not be confirmed"
            raise CompletionWaitFailed(msg, event_ids=ids, result=result) from exc


__all__ = ["EVENTS_PATH", "CompletionWaiter", "RouteDispatcher", "pending_event_ids"]
