"""dockps common — shared models and constants for the dockps CLI."""

from dockps_common.config import DockpsConfig
from dockps_common.constants import (
    COMPOSE_PROJECT_LABEL,
    CRITICAL_UPTIME,
    DISPLAY_ID_WIDTH,
    ID_PREFIX_LENGTH,
    NEVER_STARTED,
    PORT_ARROW,
    PORT_SEPARATOR,
    RUNNING_STATE,
    WARNING_UPTIME,
)
from dockps_common.models import DisplayRow, PortBinding, Severity, WorkloadRecord

__all__ = [
    "COMPOSE_PROJECT_LABEL",
    "CRITICAL_UPTIME",
    "DISPLAY_ID_WIDTH",
    "DisplayRow",
    "DockpsConfig",
    "ID_PREFIX_LENGTH",
    "NEVER_STARTED",
    "PORT_ARROW",
    "PORT_SEPARATOR",
    "PortBinding",
    "RUNNING_STATE",
    "Severity",
    "WARNING_UPTIME",
    "WorkloadRecord",
]
