"""Async client for the Bergx profile, switches and bandit APIs."""

from .auth import CredentialRefreshHandler, ExpiryEvaluator, LoggingRefreshHandler, TokenAcquirer
from .client import BergxClient
from .config import DEFAULT_HOST, BergxSettings
from .domain import (
    ArmDefinition,
    ClientCredential,
    CohortDefinition,
    RolloutRule,
    RouteDescriptor,
    Rule,
    Scope,
    SwitchDefinition,
    TryResponse,
    UserCredential,
)
from .exceptions import (
    AuthenticationRequired,
    BergxError,
    ClientAuthError,
    CompletionWaitFailed,
    ConfigurationError,
    InvalidRouteError,
    RefreshError,
    RequestFailed,
)
from .orchestration import CompletionWaiter, RequestOrchestrator

__all__ = [
    "DEFAULT_HOST",
    "ArmDefinition",
    "AuthenticationRequired",
    "BergxClient",
    "BergxError",
    "BergxSettings",
    "ClientAuthError",
    "ClientCredential",
    "CohortDefinition",
    "CompletionWaitFailed",
    "CompletionWaiter",
    "ConfigurationError",
    "CredentialRefreshHandler",
    "ExpiryEvaluator",
    "InvalidRouteError",
    "LoggingRefreshHandler",
    "RefreshError",
    "RequestFailed",
    "RequestOrchestrator",
    "RolloutRule",
    "RouteDescriptor",
    "Rule",
    "Scope",
    "SwitchDefinition",
    "TokenAcquirer",
    "TryResponse",
    "UserCredential",
]
