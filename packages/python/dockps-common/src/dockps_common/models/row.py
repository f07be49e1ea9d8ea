"""Display row model consumed by the table renderer."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum

from pydantic import BaseModel

from dockps_common.constants import DISPLAY_ID_WIDTH


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    NOMINAL = "nominal"


class DisplayRow(BaseModel):
    """A projected container, ready for columnar rendering."""

    id: str
    id_offset: int
    name: str
    state: str
    status: str
    severity: Severity
    ports: str = ""
    uptime: timedelta = timedelta(0)

    @property
    def short_id(self) -> str:
        return self.id[:DISPLAY_ID_WIDTH]
