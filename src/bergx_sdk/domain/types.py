"""Shared type aliases for the domain layer."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import JsonValue

Context = dict[str, JsonValue]
Clock = Callable[[], float]
EventId = str

__all__ = ["Clock", "Context", "EventId", "JsonValue"]
