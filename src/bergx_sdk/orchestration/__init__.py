"""Orchestration layer exports."""

from .completion import EVENTS_PATH, CompletionWaiter, RouteDispatcher, pending_event_ids
from .orchestrator import RequestOrchestrator

__all__ = [
    "EVENTS_PATH",
    "CompletionWaiter",
    "RequestOrchestrator",
    "RouteDispatcher",
    "pending_event_ids",
]
