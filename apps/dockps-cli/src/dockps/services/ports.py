"""Port binding reduction for the PORTS column."""

from __future__ import annotations

from collections.abc import Iterable

from dockps_common import PORT_ARROW, PORT_SEPARATOR, PortBinding


def reduce_ports(bindings: Iterable[PortBinding]) -> dict[int, int]:
    """Map each public-facing port to its private port.

    Published ports are keyed by the host port; unpublished ones by the
    container port, mapped to 0. Later bindings for the same key win.
    """
    reduced: dict[int, int] = {}
    for binding in bindings:
        if binding.public_port:
            reduced[binding.public_port] = binding.private_port
        else:
            reduced[binding.private_port] = 0
    return reduced


def port_labels(bindings: Iterable[PortBinding]) -> list[str]:
    reduced = reduce_ports(bindings)
    labels = []
    for public in sorted(reduced):
        private = reduced[public]
        if private and private != public:
            labels.append(f"{public}{PORT_ARROW}{private}")
        else:
            labels.append(str(public))
    return labels


def format_ports(bindings: Iterable[PortBinding]) -> str:
    """Return e.g. ``"443, 8080→80"``, ordered numerically by public port."""
    return PORT_SEPARATOR.join(port_labels(bindings))
