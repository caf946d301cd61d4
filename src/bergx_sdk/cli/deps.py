"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache

from dotenv import load_dotenv

from bergx_sdk.config import BergxSettings
from bergx_sdk.container import ServiceContainer, build_container


@lru_cache(maxsize=1)
def get_settings() -> BergxSettings:
    """Load ``.env`` once and resolve settings from the environment."""

    load_dotenv()
    return BergxSettings.from_env()


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Return a cached service container for CLI commands."""

    return build_container(get_settings())


def reset_container() -> None:
    """Clear the cached container and settings (useful for tests)."""

    get_container.cache_clear()
    get_settings.cache_clear()
