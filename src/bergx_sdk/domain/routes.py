"""Route descriptors consumed by the request orchestrator."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator

from .base import DomainModel
from .enums import HttpMethod, Scope


class RouteDescriptor(DomainModel):
    """Everything the orchestrator needs to perform one API call."""

    path: Annotated[str, Field(min_length=1)]
    method: HttpMethod
    scope: Scope
    body: Any = None
    await_completion: bool = True

    @field_validator("path")
    @classmethod
    def ensure_leading_slash(cls, value: str) -> str:
        if not value.startswith("/"):
            msg = "Route paths must start with '/'"
            raise ValueError(msg)
        return value


__all__ = ["RouteDescriptor"]
