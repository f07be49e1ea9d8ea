"""Shared Pydantic models."""

from dockps_common.models.row import DisplayRow, Severity
from dockps_common.models.workload import PortBinding, WorkloadRecord

__all__ = ["DisplayRow", "PortBinding", "Severity", "WorkloadRecord"]
