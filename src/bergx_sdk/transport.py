"""Thin wrapper around ``httpx.AsyncClient`` shared by the auth and request layers."""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import httpx

_JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class HttpTransport:
    """Sends JSON requests to a single Bergx host.

    When no client is injected a short-lived ``httpx.AsyncClient`` is opened
    for every request.
    """

    def __init__(
        self,
        host: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._host = host.rstrip("/")
        self._client = client
        self._timeout = timeout

    @property
    def host(self) -> str:
        return self._host

    def url_for(self, path: str) -> str:
        return f"{self._host}{path}"

    def bind(self, client: httpx.AsyncClient | None) -> None:
        """Route subsequent requests through ``client`` (``None`` restores per-call clients)."""

        self._client = client

    async def send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        merged = dict(_JSON_HEADERS)
        if headers:
            merged.update(headers)
        async with self._client_scope() as client:
            return await client.request(
                method,
                self.url_for(path),
                json=json,
                headers=merged,
                timeout=self._timeout,
            )

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


__all__ = ["HttpTransport", "is_success"]
