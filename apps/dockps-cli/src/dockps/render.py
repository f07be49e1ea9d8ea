"""Rich table rendering for projected container rows."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from dockps_common import DISPLAY_ID_WIDTH, DisplayRow, Severity

SEVERITY_STYLES = {
    Severity.CRITICAL: "red",
    Severity.WARNING: "color(214)",
    Severity.NOMINAL: "green",
}

STATE_MARK = "●"


def id_cell(row: DisplayRow) -> Text:
    """Significant prefix in the default style, the rest dimmed."""
    short_id = row.short_id
    text = Text(short_id[: row.id_offset])
    text.append(short_id[row.id_offset :], style="bright_black")
    return text


def state_cell(row: DisplayRow) -> Text:
    text = Text()
    text.append(STATE_MARK, style=SEVERITY_STYLES[row.severity])
    text.append(f" {row.state}")
    return text


def build_table(rows: list[DisplayRow]) -> Table:
    name_width = max((len(r.name) for r in rows), default=0) + 3

    table = Table(box=None, header_style="blue", pad_edge=False, show_edge=False)
    table.add_column("ID", min_width=DISPLAY_ID_WIDTH, no_wrap=True)
    table.add_column("NAME", min_width=name_width, no_wrap=True)
    table.add_column("STATE", min_width=11, no_wrap=True)
    table.add_column("STATUS", min_width=10, no_wrap=True)
    table.add_column("PORTS")

    for row in rows:
        table.add_row(id_cell(row), row.name, state_cell(row), row.status, row.ports)
    return table


def render_table(rows: list[DisplayRow], console: Console) -> None:
    console.print(build_table(rows))
