"""Service container wiring the SDK components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bergx_sdk.auth import CredentialRefreshHandler
from bergx_sdk.client import BergxClient
from bergx_sdk.config import BergxSettings
from bergx_sdk.orchestration import RequestOrchestrator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the configured client with its shared settings."""

    settings: BergxSettings
    client: BergxClient

    @property
    def orchestrator(self) -> RequestOrchestrator:
        return self.client.orchestrator


def build_container(
    settings: BergxSettings | None = None,
    *,
    refresh_handler: CredentialRefreshHandler | None = None,
) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or BergxSettings.from_env()
    client = BergxClient(
        resolved_settings,
        refresh_handler=refresh_handler,
        logger=logging.getLogger("bergx_sdk"),
    )
    logger.debug(
        "Built Bergx client for %s (%s)",
        resolved_settings.host,
        resolved_settings.environment,
    )
    return ServiceContainer(settings=resolved_settings, client=client)


__all__ = ["ServiceContainer", "build_container"]
