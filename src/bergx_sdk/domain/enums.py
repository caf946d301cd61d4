"""Enumerations used across the Bergx SDK domain layer."""

from __future__ import annotations

from enum import StrEnum


class Scope(StrEnum):
    """Which identity a request authenticates as."""

    USER = "user"
    CLIENT = "client"
    UNAUTHENTICATED = "unauthenticated"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class SwitchType(StrEnum):
    """Feature switch flavours understood by the switches service."""

    BASIC = "basic"
    ROLLOUT = "ROLLOUT"
    ADVANCED = "ADVANCED"


class RuleOperator(StrEnum):
    """Comparison operators available to advanced switch rules."""

    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"


__all__ = ["HttpMethod", "RuleOperator", "Scope", "SwitchType"]
