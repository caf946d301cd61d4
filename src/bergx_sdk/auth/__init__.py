"""Credential handling for the Bergx SDK."""

from .acquirer import REFRESH_PATH, TOKEN_PATH, TokenAcquirer
from .expiry import ExpiryEvaluator
from .handlers import CredentialRefreshHandler, LoggingRefreshHandler

__all__ = [
    "REFRESH_PATH",
    "TOKEN_PATH",
    "CredentialRefreshHandler",
    "ExpiryEvaluator",
    "LoggingRefreshHandler",
    "TokenAcquirer",
]
