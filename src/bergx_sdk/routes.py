"""Route descriptors for the profile, switches and bandit endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from bergx_sdk.domain import HttpMethod, RouteDescriptor, Scope
from bergx_sdk.exceptions import InvalidRouteError

PROFILE_PATH = "/api/v1/profile/me"
SWITCHES_PATH = "/api/v1/switches"
BANDIT_PATH = "/api/v1/bandit"


def _segment(value: str) -> str:
    if not value:
        msg = "Path parameters must be non-empty"
        raise InvalidRouteError(msg)
    return quote(str(value), safe="")


def _user(method: HttpMethod, path: str, body: Any = None) -> RouteDescriptor:
    return RouteDescriptor(path=path, method=method, scope=Scope.USER, body=body)


def _client(method: HttpMethod, path: str, body: Any = None) -> RouteDescriptor:
    return RouteDescriptor(path=path, method=method, scope=Scope.CLIENT, body=body)


# Profile


def get_profile() -> RouteDescriptor:
    return _user(HttpMethod.GET, PROFILE_PATH)


def update_profile(data: dict[str, Any]) -> RouteDescriptor:
    return _user(HttpMethod.PUT, PROFILE_PATH, data)


# Switches


def list_switches() -> RouteDescriptor:
    return _client(HttpMethod.GET, f"{SWITCHES_PATH}/list")


def create_switch(data: dict[str, Any]) -> RouteDescriptor:
    return _client(HttpMethod.POST, f"{SWITCHES_PATH}/", data)


def check_switch(switch_name: str, context: dict[str, Any]) -> RouteDescriptor:
    return _client(HttpMethod.POST, f"{SWITCHES_PATH}/check/{_segment(switch_name)}", context)


def check_all_switches(context: dict[str, Any]) -> RouteDescriptor:
    return _client(HttpMethod.POST, f"{SWITCHES_PATH}/check/all", context)


def update_switch(switch_name: str, data: dict[str, Any]) -> RouteDescriptor:
    return _client(HttpMethod.POST, f"{SWITCHES_PATH}/{_segment(switch_name)}", data)


def delete_switch(switch_name: str) -> RouteDescriptor:
    return _client(HttpMethod.DELETE, f"{SWITCHES_PATH}/{_segment(switch_name)}")


# Bandit cohorts


def list_cohorts() -> RouteDescriptor:
    return _client(HttpMethod.GET, f"{BANDIT_PATH}/")


def create_cohort(data: dict[str, Any]) -> RouteDescriptor:
    return _client(HttpMethod.POST, f"{BANDIT_PATH}/cohort", data)


def update_cohort(cohort_id: str, data: dict[str, Any]) -> RouteDescriptor:
    return _client(HttpMethod.PUT, f"{BANDIT_PATH}/cohort/{_segment(cohort_id)}", data)


def delete_cohort(cohort_id: str) -> RouteDescriptor:
    return _client(HttpMethod.DELETE, f"{BANDIT_PATH}/cohort/{_segment(cohort_id)}")


def try_cohort(cohort_id: str) -> RouteDescriptor:
    return _client(HttpMethod.GET, f"{BANDIT_PATH}/cohort/{_segment(cohort_id)}/try")


def win_cohort(cohort_id: str, arm_name: str) -> RouteDescriptor:
    return _client(
        HttpMethod.POST,
        f"{BANDIT_PATH}/cohort/{_segment(cohort_id)}/{_segment(arm_name)}/win",
    )


def reset_cohort(cohort_id: str) -> RouteDescriptor:
    return _client(HttpMethod.POST, f"{BANDIT_PATH}/cohort/{_segment(cohort_id)}/reset")


__all__ = [
    "BANDIT_PATH",
    "PROFILE_PATH",
    "SWITCHES_PATH",
    "check_all_switches",
    "check_switch",
    "create_cohort",
    "create_switch",
    "delete_cohort",
    "delete_switch",
    "get_profile",
    "list_cohorts",
    "list_switches",
    "reset_cohort",
    "try_cohort",
    "update_cohort",
    "update_profile",
    "update_switch",
    "win_cohort",
]
