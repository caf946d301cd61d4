"""Domain models shared by the Bergx SDK."""

from .bandit import ArmDefinition, CohortDefinition, TryResponse
from .base import DomainModel, WireModel
from .credentials import ClientCredential, OAuthTokenResponse, UserCredential
from .enums import HttpMethod, RuleOperator, Scope, SwitchType
from .routes import RouteDescriptor
from .switches import RolloutRule, Rule, SwitchDefinition
from .types import Clock, Context, EventId, JsonValue

__all__ = [
    "ArmDefinition",
    "ClientCredential",
    "Clock",
    "CohortDefinition",
    "Context",
    "DomainModel",
    "EventId",
    "HttpMethod",
    "JsonValue",
    "OAuthTokenResponse",
    "RolloutRule",
    "RouteDescriptor",
    "Rule",
    "RuleOperator",
    "Scope",
    "SwitchDefinition",
    "SwitchType",
    "TryResponse",
    "UserCredential",
    "WireModel",
]
