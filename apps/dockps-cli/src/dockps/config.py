"""CLI configuration — singleton DockpsConfig resolved at startup."""

from __future__ import annotations

from functools import lru_cache

from pydantic import ValidationError

from dockps_common import DockpsConfig

from dockps.errors import ConfigError


@lru_cache(maxsize=1)
def get_config() -> DockpsConfig:
    """Return the global DockpsConfig (resolved once, cached)."""
    try:
        return DockpsConfig()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
