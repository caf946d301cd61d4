from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest
from conftest import HOST, NOW, FakeBergx, make_token

from bergx_sdk.auth import ExpiryEvaluator, TokenAcquirer
from bergx_sdk.domain import HttpMethod, RouteDescriptor, Scope
from bergx_sdk.exceptions import CompletionWaitFailed, RequestFailed
from bergx_sdk.orchestration import CompletionWaiter, RequestOrchestrator, pending_event_ids
from bergx_sdk.transport import HttpTransport


def _orchestrator(fake: FakeBergx) -> RequestOrchestrator:
    expiry = ExpiryEvaluator(lambda: NOW)
    transport = HttpTransport(HOST, client=fake.client())
    acquirer = TokenAcquirer(transport, client_id="c1", client_secret="s1", expiry=expiry)
    return RequestOrchestrator(transport, acquirer, expiry=expiry)


def _mutation(path: str = "/api/v1/switches/beta", **kwargs: Any) -> RouteDescriptor:
    return RouteDescriptor(
        path=path,
        method=HttpMethod.POST,
        scope=Scope.CLIENT,
        body={"value": True},
        **kwargs,
    )


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"eventIds": ["a", "b"]}, ("a", "b")),
        ({"eventId": "evt-1"}, ("evt-1",)),
        ({"eventIds": [], "eventId": "evt-2"}, ("evt-2",)),
        ({"status": "ok"}, ()),
        ([{"eventId": "x"}], ()),
        (None, ()),
    ],
)
def test_pending_event_ids(payload: Any, expected: tuple[str, ...]) -> None:
    assert pending_event_ids(payload) == expected


def test_dispatch_waits_for_listed_events_before_returning(fake_bergx: FakeBergx) -> None:
    confirmed: list[Any] = []

    def _confirm(request: httpx.Request) -> httpx.Response:
        confirmed.append(request.url.path)
        return httpx.Response(200, json={"status": "done"})

    fake_bergx.issue_client_tokens(make_token(exp=NOW + 600))
    fake_bergx.on_json("POST", "/api/v1/switches/beta", {"status": "ok", "eventIds": ["a", "b"]})
    fake_bergx.on("POST", "/api/v1/events", _confirm)
    orchestrator = _orchestrator(fake_bergx)

    result = asyncio.run(orchestrator.dispatch(_mutation()))

    assert result == {"status": "ok", "eventIds": ["a", "b"]}
    assert confirmed == ["/api/v1/events"]
    assert fake_bergx.paths == [
        "POST /oauth/token",
        "POST /api/v1/switches/beta",
        "POST /api/v1/events",
    ]
    assert fake_bergx.calls[-1].body == {"events": ["a", "b"]}


def test_failed_wait_surfaces_completion_wait_failed(fake_bergx: FakeBergx) -> None:
    fake_bergx.issue_client_tokens(make_token(exp=NOW + 600))
    fake_bergx.on_json("POST", "/api/v1/switches/beta", {"status": "ok", "eventIds": ["a", "b"]})
    fake_bergx.on("POST", "/api/v1/events", httpx.Response(504, text="gateway timeout"))
    orchestrator = _orchestrator(fake_bergx)

    with pytest.raises(CompletionWaitFailed) as excinfo:
        asyncio.run(orchestrator.dispatch(_mutation()))

    error = excinfo.value
    assert error.event_ids == ("a", "b")
    assert error.result == {"status": "ok", "eventIds": ["a", "b"]}
    assert isinstance(error.__cause__, RequestFailed)
    assert fake_bergx.count("POST", "/api/v1/switches/beta") == 1


def test_responses_without_markers_skip_the_wait(fake_bergx: FakeBergx) -> None:
    fake_bergx.issue_client_tokens(make_token(exp=NOW + 600))
    fake_bergx.on_json("POST", "/api/v1/switches/beta", {"status": "ok"})
    orchestrator = _orchestrator(fake_bergx)

    asyncio.run(orchestrator.dispatch(_mutation()))

    assert fake_bergx.count("POST", "/api/v1/events") == 0


def test_routes_can_opt_out_of_waiting(fake_bergx: FakeBergx) -> None:
    fake_bergx.issue_client_tokens(make_token(exp=NOW + 600))
    fake_bergx.on_json("POST", "/api/v1/switches/beta", {"eventId": "evt-9"})
    orchestrator = _orchestrator(fake_bergx)

    asyncio.run(orchestrator.dispatch(_mutation(await_completion=False)))

    assert fake_bergx.count("POST", "/api/v1/events") == 0


def test_events_response_never_triggers_a_nested_wait(fake_bergx: FakeBergx) -> None:
    fake_bergx.issue_client_tokens(make_token(exp=NOW + 600))
    fake_bergx.on_json("POST", "/api/v1/events", {"eventIds": ["loop"]})
    orchestrator = _orchestrator(fake_bergx)
    waiter = CompletionWaiter(orchestrator)

    asyncio.run(waiter.wait_for_completion(["evt-1"]))

    assert fake_bergx.count("POST", "/api/v1/events") == 1


def test_waiting_on_nothing_makes_no_call(fake_bergx: FakeBergx) -> None:
    waiter = CompletionWaiter(_orchestrator(fake_bergx))
    asyncio.run(waiter.wait_for_completion([]))
    assert fake_bergx.calls == []
