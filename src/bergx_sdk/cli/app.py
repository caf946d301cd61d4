"""Typer CLI wiring the Bergx client."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from bergx_sdk.client import BergxClient
from bergx_sdk.exceptions import BergxError, CompletionWaitFailed, ConfigurationError
from bergx_sdk.utils import format_epoch

from .deps import get_container, get_settings

T = TypeVar("T")

app = typer.Typer(help="Bergx platform command-line interface")
switches_app = typer.Typer(help="Feature switch utilities")
bandit_app = typer.Typer(help="Bandit cohort utilities")
app.add_typer(switches_app, name="switches")
app.add_typer(bandit_app, name="bandit")


def _parse_context(value: str | None) -> dict[str, Any]:
    if not value:
        return {}
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter("context must be a JSON object") from exc
    if not isinstance(parsed, dict):
        raise typer.BadParameter("context must be a JSON object")
    return parsed


def _run(coro: Awaitable[T]) -> T:
    async def _wrapped() -> T:
        return await coro

    try:
        return asyncio.run(_wrapped())
    except CompletionWaitFailed as exc:
        typer.echo(f"Change applied but not yet confirmed: {exc}")
        raise typer.Exit(code=1) from exc
    except BergxError as exc:
        typer.echo(f"Request failed: {exc}")
        raise typer.Exit(code=1) from exc


def _client() -> BergxClient:
    try:
        return get_container().client
    except ConfigurationError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc


def _rows(payload: Any) -> list[dict[str, Any]]:
    if isinstance(payload, dict):
        payload = next((value for value in payload.values() if isinstance(value, list)), [])
    if not isinstance(payload, list):
        return []
    return [item for item in payload if isinstance(item, dict)]


def _print_rows(title: str, payload: Any, columns: tuple[str, ...]) -> None:
    items = _rows(payload)
    if not items:
        typer.echo(f"No {title.lower()} found")
        return
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for item in items:
        table.add_row(*(str(item.get(column, "")) for column in columns))
    Console().print(table)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved client settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Host:\t" + settings.host)
    typer.echo("Client ID:\t" + (settings.client_id or "(unset)"))
    typer.echo("Client Secret:\t" + settings.masked_secret)


@app.command("client-token")
def client_token() -> None:
    """Acquire a fresh client credential and show when it expires."""

    client = _client()
    _run(client.get_new_client_access_token())
    credential = client.orchestrator.client_credential
    expires_at = credential.expires_at if credential else None
    typer.echo("Client token acquired, expires at " + format_epoch(expires_at))


@switches_app.command("list")
def switches_list() -> None:
    """List the switches defined for this client."""

    client = _client()
    switches = _run(client.get_switches())
    _print_rows("Switches", switches, ("name", "type", "value"))


@switches_app.command("check")
def switches_check(
    name: str,
    context: str | None = typer.Option(None, help="Evaluation context as a JSON object"),
) -> None:
    """Evaluate a single switch."""

    ctx = _parse_context(context)
    client = _client()
    value = _run(client.check_switch(name, ctx))
    typer.echo(f"{name}: {'on' if value else 'off'}")


@switches_app.command("check-all")
def switches_check_all(
    context: str | None = typer.Option(None, help="Evaluation context as a JSON object"),
) -> None:
    """Evaluate every switch for the given context."""

    ctx = _parse_context(context)
    client = _client()
    values = _run(client.check_all_switches(ctx))
    if not values:
        typer.echo("No switches found")
        return
    for switch_name in sorted(values):
        typer.echo(f"{switch_name}: {'on' if values[switch_name] else 'off'}")


@switches_app.command("delete")
def switches_delete(name: str) -> None:
    """Delete a switch."""

    client = _client()
    _run(client.delete_switch(name))
    typer.echo(f"Deleted switch {name}")


@bandit_app.command("list")
def bandit_list() -> None:
    """List bandit cohorts."""

    client = _client()
    cohorts = _run(client.get_bandit_cohorts())
    _print_rows("Cohorts", cohorts, ("cohortId", "name", "totalTries", "totalWins"))


@bandit_app.command("try")
def bandit_try(cohort_id: str) -> None:
    """Ask the service which arm to show next."""

    client = _client()
    selection = _run(client.try_bandit_cohort(cohort_id))
    typer.echo(f"Arm: {selection.arm_name}")


@bandit_app.command("win")
def bandit_win(cohort_id: str, arm_name: str) -> None:
    """Record a win for an arm."""

    client = _client()
    _run(client.win_bandit_cohort(cohort_id, arm_name))
    typer.echo(f"Recorded win for {arm_name} in {cohort_id}")


@bandit_app.command("reset")
def bandit_reset(cohort_id: str) -> None:
    """Reset the tallies of a cohort."""

    client = _client()
    _run(client.reset_bandit_cohort(cohort_id))
    typer.echo(f"Reset cohort {cohort_id}")
