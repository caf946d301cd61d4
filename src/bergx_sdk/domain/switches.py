"""Request models for the feature switch endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, JsonValue

from .base import WireModel
from .enums import RuleOperator, SwitchType


class Rule(WireModel):
    """Condition evaluated against the caller-supplied context."""

    property: Annotated[str, Field(min_length=1)]
    operator: RuleOperator
    value: JsonValue
    and_: tuple[Rule, ...] | None = Field(default=None, alias="and")


class RolloutRule(WireModel):
    """Percentage rollout keyed on a context property."""

    property: Annotated[str, Field(min_length=1)]
    epsilon: Annotated[float, Field(ge=0.0, le=1.0)]


class SwitchDefinition(WireModel):
    """Payload used to create a feature switch."""

    name: Annotated[str, Field(min_length=1)]
    type: SwitchType = SwitchType.BASIC
    app: Annotated[str, Field(min_length=1)]
    value: bool | None = None
    rules: tuple[Rule, ...] | None = None
    rollout_rule: RolloutRule | None = Field(default=None, alias="rolloutRule")


__all__ = ["Rule", "RolloutRule", "SwitchDefinition"]
