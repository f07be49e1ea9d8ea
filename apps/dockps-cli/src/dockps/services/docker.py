"""Docker Engine API access — container listing and start-time lookup."""

from __future__ import annotations

import logging
from typing import Any

import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from dockps_common import DockpsConfig, PortBinding, WorkloadRecord

from dockps.errors import DockerError, DockerUnavailableError
from dockps.services.projector import in_project

log = logging.getLogger(__name__)


def get_client(cfg: DockpsConfig) -> docker.DockerClient:
    try:
        if cfg.docker_host:
            return docker.DockerClient(base_url=cfg.docker_host, timeout=cfg.docker_timeout)
        return docker.from_env(timeout=cfg.docker_timeout)
    except DockerException as exc:
        raise DockerUnavailableError(f"Docker unavailable: {exc}") from exc


def _to_record(summary: dict[str, Any]) -> WorkloadRecord:
    return WorkloadRecord(
        id=summary.get("Id", ""),
        names=summary.get("Names") or [],
        state=summary.get("State", ""),
        labels=summary.get("Labels") or {},
        ports=[
            PortBinding(
                private_port=p.get("PrivatePort", 0),
                public_port=p.get("PublicPort", 0),
                ip=p.get("IP", ""),
                type=p.get("Type", "tcp"),
            )
            for p in summary.get("Ports") or []
        ],
    )


def started_at(client: docker.DockerClient, container_id: str) -> str | None:
    """Return ``State.StartedAt`` for a container, or None if it can't be inspected."""
    try:
        details = client.api.inspect_container(container_id)
    except (DockerException, RequestException) as exc:
        log.debug("Inspect failed for %s: %s", container_id[:12], exc)
        return None
    return (details.get("State") or {}).get("StartedAt")


def list_records(client: docker.DockerClient, project: str | None = None) -> list[WorkloadRecord]:
    """List all containers (running and stopped).

    Only containers inside ``project`` are inspected for their start time;
    the rest are returned with ``started_at`` unset so they still take part
    in identifier disambiguation.
    """
    try:
        summaries = client.api.containers(all=True)
    except (DockerException, RequestException) as exc:
        raise DockerError(f"Error listing containers: {exc}") from exc

    records = []
    for summary in summaries:
        record = _to_record(summary)
        if in_project(record, project):
            record.started_at = started_at(client, record.id)
        records.append(record)
    log.debug("Listed %d containers", len(records))
    return records
