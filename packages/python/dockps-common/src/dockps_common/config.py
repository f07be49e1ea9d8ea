"""Central configuration for dockps."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from dockps_common.constants import DEFAULT_DOCKER_TIMEOUT, DEFAULT_LOG_LEVEL


def _default_compose_project() -> str:
    env = os.environ.get("COMPOSE_PROJECT_NAME")
    if env:
        return env
    # docker compose names the project after the working directory
    return Path.cwd().name


class DockpsConfig(BaseModel):
    """Runtime configuration resolved once at startup."""

    docker_host: str | None = Field(default_factory=lambda: os.environ.get("DOCKER_HOST") or None)
    docker_timeout: int = Field(
        default_factory=lambda: os.environ.get("DOCKPS_TIMEOUT", DEFAULT_DOCKER_TIMEOUT),
        validate_default=True,
        gt=0,
    )
    compose_project: str = Field(default_factory=_default_compose_project)
    log_level: str = Field(
        default_factory=lambda: os.environ.get("DOCKPS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        validate_default=True,
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level
