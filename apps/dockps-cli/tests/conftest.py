"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock

import pytest

from dockps_common import COMPOSE_PROJECT_LABEL, DockpsConfig

NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def summary(
    container_id: str,
    name: str,
    *,
    state: str = "running",
    project: str | None = None,
    ports: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """A container summary as returned by the Engine API ``/containers/json``."""
    labels = {COMPOSE_PROJECT_LABEL: project} if project else {}
    return {
        "Id": container_id,
        "Names": [f"/{name}"],
        "State": state,
        "Labels": labels,
        "Ports": ports or [],
    }


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def tmp_config() -> DockpsConfig:
    return DockpsConfig(
        docker_host=None,
        docker_timeout=5,
        compose_project="shop",
        log_level="WARNING",
    )


@pytest.fixture
def docker_client() -> MagicMock:
    """A docker client whose low-level API serves two containers."""
    client = MagicMock()
    client.api.containers.return_value = [
        summary(
            "4f1c9a0b2d3e5f60718293a4b5c6d7e8f9a0b1c2d3e4f5a6b7c8d9e0f1a2b3c4",
            "shop-web-1",
            project="shop",
            ports=[{"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 8080, "Type": "tcp"}],
        ),
        summary(
            "4f7e00112233445566778899aabbccddeeff00112233445566778899aabbccdd",
            "blog-db-1",
            state="exited",
            project="blog",
            ports=[{"PrivatePort": 5432, "Type": "tcp"}],
        ),
    ]
    client.api.inspect_container.return_value = {
        "State": {"StartedAt": "2026-03-01T10:00:00.123456789Z"},
    }
    return client
