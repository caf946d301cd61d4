from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import jwt
import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from bergx_sdk.config import BergxSettings  # noqa: E402

SIGNING_KEY = "bergx-test-signing-key-0123456789abcdef"
NOW = 1_700_000_000.0
HOST = "https://example.test"


def make_token(exp: float | None = NOW + 3600, sub: str = "user-1", **claims: Any) -> str:
    payload: dict[str, Any] = {"sub": sub, **claims}
    if exp is not None:
        payload["exp"] = exp
    return jwt.encode(payload, SIGNING_KEY, algorithm="HS256")


@dataclass
class RecordedCall:
    method: str
    url: str
    path: str
    headers: httpx.Headers
    body: Any


Responder = httpx.Response | Callable[[httpx.Request], httpx.Response]


@dataclass
class FakeBergx:
    """In-memory stand-in for the Bergx service backed by ``httpx.MockTransport``."""

    delay: float = 0.0
    calls: list[RecordedCall] = field(default_factory=list)
    _routes: dict[tuple[str, str], list[Responder]] = field(default_factory=dict)

    def on(self, method: str, path: str, *responses: Responder) -> FakeBergx:
        self._routes[(method.upper(), path)] = list(responses)
        return self

    def on_json(self, method: str, path: str, payload: Any, status: int = 200) -> FakeBergx:
        return self.on(method, path, httpx.Response(status, json=payload))

    def issue_client_tokens(self, *tokens: str) -> FakeBergx:
        return self.on(
            "POST",
            "/oauth/token",
            *(httpx.Response(200, json={"access_token": token}) for token in tokens),
        )

    @property
    def paths(self) -> list[str]:
        return [f"{call.method} {call.path}" for call in self.calls]

    def count(self, method: str, path: str) -> int:
        return sum(1 for call in self.calls if call.method == method and call.path == path)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        self.calls.append(
            RecordedCall(
                method=request.method,
                url=str(request.url),
                path=path,
                headers=request.headers,
                body=body,
            )
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        queue = self._routes.get((request.method, path))
        if not queue:
            return httpx.Response(404, text=f"no route for {request.method} {path}")
        responder = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(responder):
            return responder(request)
        return httpx.Response(
            responder.status_code,
            headers=responder.headers,
            content=responder.content,
        )

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_bergx() -> FakeBergx:
    return FakeBergx()


@pytest.fixture
def settings() -> BergxSettings:
    return BergxSettings(client_id="c1", client_secret="s1", host=HOST)
