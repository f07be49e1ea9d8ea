"""Raw workload records as reported by the container runtime."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PortBinding(BaseModel):
    """A single port exposed by a container.

    ``public_port`` is 0 when the port is not published to the host.
    """

    private_port: int
    public_port: int = 0
    ip: str = ""
    type: str = "tcp"


class WorkloadRecord(BaseModel):
    """One container summary, plus the start time from its detail lookup."""

    id: str
    names: list[str] = Field(default_factory=list)
    state: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    ports: list[PortBinding] = Field(default_factory=list)
    started_at: str | None = None

    @property
    def name(self) -> str:
        if not self.names:
            return ""
        return self.names[0].removeprefix("/")
