from __future__ import annotations

from bergx_sdk.client import BergxClient
from bergx_sdk.config import BergxSettings
from bergx_sdk.container import build_container


class NullHandler:
    def on_credential_refresh(self, user_sub: str, access_token: str) -> None:
        return None


def test_build_container_wires_client() -> None:
    settings = BergxSettings(client_id="c1", client_secret="s1", environment="test")

    container = build_container(settings, refresh_handler=NullHandler())

    assert container.settings is settings
    assert isinstance(container.client, BergxClient)
    assert container.client.settings is settings
    assert container.orchestrator is container.client.orchestrator
    assert container.orchestrator.client_credential is None
