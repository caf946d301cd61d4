"""Local liveness checks for bearer tokens.

Tokens are decoded without verifying their signature. The service remains
the only authority on whether a token is valid; the ``exp`` claim is read
here purely to decide when to fetch a fresh one.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any

import jwt

from bergx_sdk.domain import Clock
from bergx_sdk.utils import epoch_seconds


class ExpiryEvaluator:
    """Decides whether a bearer token should be replaced before use."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or epoch_seconds

    def claims(self, token: str | None) -> dict[str, Any] | None:
        """Return the unverified claims of ``token`` or ``None`` when it cannot be decoded."""

        if not token:
            return None
        try:
            payload = jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError:
            return None
        if not isinstance(payload, Mapping):
            return None
        return dict(payload)

    def expiry(self, token: str | None) -> float | None:
        claims = self.claims(token)
        if claims is None:
            return None
        exp = claims.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, Real):
            return None
        return float(exp)

    def subject(self, token: str | None) -> str:
        claims = self.claims(token) or {}
        sub = claims.get("sub")
        return sub if isinstance(sub, str) else ""

    def is_expired(self, token: str | None) -> bool:
        exp = self.expiry(token)
        if exp is None:
            return True
        return exp < self._clock()


__all__ = ["ExpiryEvaluator"]
