"""Utility helpers."""

from .time import epoch_seconds, format_epoch

__all__ = ["epoch_seconds", "format_epoch"]
