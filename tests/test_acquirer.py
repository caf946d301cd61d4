from __future__ import annotations

import asyncio

import httpx
import pytest
from conftest import HOST, NOW, FakeBergx, make_token

from bergx_sdk.auth import ExpiryEvaluator, TokenAcquirer
from bergx_sdk.domain import ClientCredential
from bergx_sdk.exceptions import ClientAuthError, RefreshError
from bergx_sdk.transport import HttpTransport


def _acquirer(fake: FakeBergx) -> TokenAcquirer:
    transport = HttpTransport(HOST, client=fake.client())
    return TokenAcquirer(
        transport,
        client_id="c1",
        client_secret="s1",
        expiry=ExpiryEvaluator(lambda: NOW),
    )


def test_refresh_returns_new_access_token(fake_bergx: FakeBergx) -> None:
    fresh = make_token()
    fake_bergx.on_json("POST", "/oauth/refresh", {"access_token": fresh})

    token = asyncio.run(_acquirer(fake_bergx).refresh_user_token("rt-1"))

    assert token == fresh
    (call,) = fake_bergx.calls
    assert call.url == f"{HOST}/oauth/refresh"
    assert call.body == {
        "grant_type": "refresh_token",
        "refresh_token": "rt-1",
        "client_id": "c1",
        "client_secret": "s1",
    }
    assert "authorization" not in call.headers


def test_refresh_accepts_legacy_camel_case_field(fake_bergx: FakeBergx) -> None:
    fake_bergx.on_json("POST", "/oauth/refresh", {"accessToken": "legacy"})
    assert asyncio.run(_acquirer(fake_bergx).refresh_user_token("rt-1")) == "legacy"


def test_refresh_rejection_carries_body_verbatim(fake_bergx: FakeBergx) -> None:
    fake_bergx.on("POST", "/oauth/refresh", httpx.Response(401, text='{"error":"invalid_grant"}'))

    with pytest.raises(RefreshError) as excinfo:
        asyncio.run(_acquirer(fake_bergx).refresh_user_token("stale"))

    assert excinfo.value.body == '{"error":"invalid_grant"}'
    assert len(fake_bergx.calls) == 1


def test_refresh_transport_failure_raises_refresh_error(fake_bergx: FakeBergx) -> None:
    def _boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    fake_bergx.on("POST", "/oauth/refresh", _boom)

    with pytest.raises(RefreshError) as excinfo:
        asyncio.run(_acquirer(fake_bergx).refresh_user_token("rt-1"))
    assert "connection refused" in (excinfo.value.body or "")


def test_client_token_returns_credential_with_expiry(fake_bergx: FakeBergx) -> None:
    token = make_token(exp=NOW + 900, sub="app")
    fake_bergx.issue_client_tokens(token)

    credential = asyncio.run(_acquirer(fake_bergx).acquire_client_token())

    assert credential == ClientCredential(access_token=token, expires_at=NOW + 900)
    (call,) = fake_bergx.calls
    assert call.path == "/oauth/token"
    assert call.body == {"grant_type": "client_credentials", "client_id": "c1", "client_secret": "s1"}


def test_client_token_failure_raises_client_auth_error(fake_bergx: FakeBergx) -> None:
    fake_bergx.on("POST", "/oauth/token", httpx.Response(403, text="forbidden"))

    with pytest.raises(ClientAuthError) as excinfo:
        asyncio.run(_acquirer(fake_bergx).acquire_client_token())
    assert excinfo.value.body == "forbidden"


def test_client_token_without_access_token_is_rejected(fake_bergx: FakeBergx) -> None:
    fake_bergx.on_json("POST", "/oauth/token", {"token_type": "bearer"})

    with pytest.raises(ClientAuthError):
        asyncio.run(_acquirer(fake_bergx).acquire_client_token())
