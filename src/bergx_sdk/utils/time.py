"""Time-related helpers."""

from __future__ import annotations

import time
from datetime import UTC, datetime


def epoch_seconds() -> float:
    """Wall-clock time in (fractional) seconds since the epoch."""

    return time.time()


def format_epoch(value: float | None) -> str:
    if value is None:
        return "unknown"
    return datetime.fromtimestamp(value, UTC).isoformat()
