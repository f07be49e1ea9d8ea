"""Project raw container records into sorted display rows."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from dockps_common import COMPOSE_PROJECT_LABEL, NEVER_STARTED, DisplayRow, WorkloadRecord

from dockps.services.ports import format_ports
from dockps.services.prefix_index import PrefixIndex
from dockps.services.uptime import classify_severity, human_uptime, parse_started_at

log = logging.getLogger(__name__)


def in_project(record: WorkloadRecord, project: str | None) -> bool:
    """True when no project scope is set or the record carries the project label."""
    return project is None or record.labels.get(COMPOSE_PROJECT_LABEL) == project


def project_records(
    records: list[WorkloadRecord],
    *,
    project: str | None = None,
    now: datetime | None = None,
) -> list[DisplayRow]:
    """Build display rows for ``records``, sorted by name.

    Identifier prefixes are disambiguated against the whole batch, including
    records filtered out by ``project``. Records without a parseable start
    time are skipped, as are containers that were created but never started.
    """
    now = now or datetime.now(timezone.utc)
    index = PrefixIndex(r.id for r in records)

    rows: list[DisplayRow] = []
    for record in records:
        if not in_project(record, project):
            continue
        if record.started_at is None:
            log.debug("Skipping %s: no start time", record.id[:12])
            continue
        try:
            started = parse_started_at(record.started_at)
        except (ValueError, OverflowError):
            log.debug("Skipping %s: unparseable start time %r", record.id[:12], record.started_at)
            continue
        if started == NEVER_STARTED:
            log.debug("Skipping %s: never started", record.id[:12])
            continue

        uptime = max(now - started, timedelta(0))
        rows.append(
            DisplayRow(
                id=record.id,
                id_offset=index.offset(record.id),
                name=record.name,
                state=record.state,
                status=human_uptime(uptime),
                severity=classify_severity(record.state, uptime),
                ports=format_ports(record.ports),
                uptime=uptime,
            )
        )

    rows.sort(key=lambda row: row.name)
    return rows
