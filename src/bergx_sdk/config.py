"""Lightweight client configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_HOST = "https://p01.bergx.io"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number, got {raw!r}"
        raise ConfigurationError(msg) from exc


@dataclass(frozen=True)
class BergxSettings:
    """Immutable client configuration, normally sourced from environment variables."""

    client_id: str = ""
    client_secret: str = ""
    host: str = DEFAULT_HOST
    request_timeout: float = 30.0
    environment: str = "production"

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "host", (self.host or DEFAULT_HOST).rstrip("/"))

    @classmethod
    def from_env(cls) -> BergxSettings:
        return cls(
            client_id=os.getenv("BERGX_CLIENT_ID", cls.client_id),
            client_secret=os.getenv("BERGX_CLIENT_SECRET", cls.client_secret),
            host=os.getenv("BERGX_HOST") or cls.host,
            request_timeout=_env_float("BERGX_REQUEST_TIMEOUT", cls.request_timeout),
            environment=os.getenv("BERGX_ENV", cls.environment),
        )

    def require_credentials(self) -> None:
        """Fail fast when the client id or secret is missing."""

        if not self.client_id or not self.client_secret:
            msg = "BERGX_CLIENT_ID and BERGX_CLIENT_SECRET must both be configured"
            raise ConfigurationError(msg)

    @property
    def masked_secret(self) -> str:
        if not self.client_secret:
            return "(unset)"
        return self.client_secret[:2] + "*" * max(4, len(self.client_secret) - 2)


__all__ = ["DEFAULT_HOST", "BergxSettings"]
