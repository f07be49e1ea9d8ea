"""Root Typer application for dockps."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dockps.config import get_config
from dockps.errors import DockpsError
from dockps.render import render_table
from dockps.services import docker
from dockps.services.projector import project_records

app = typer.Typer(
    name="dockps",
    help="Compact docker ps — short unique IDs, uptime and published ports.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def ps(
    compose: bool = typer.Option(False, "--compose", "-c", help="Only show the current compose project"),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Only show this compose project"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """List containers with their shortest unique ID prefix."""
    try:
        cfg = get_config()
        _setup_logging("DEBUG" if verbose else cfg.log_level)
        if compose and project is None:
            project = cfg.compose_project

        client = docker.get_client(cfg)
        try:
            records = docker.list_records(client, project=project)
        finally:
            client.close()
    except DockpsError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(exc.exit_code)

    rows = project_records(records, project=project)
    if not rows:
        console.print("[yellow]No containers found.[/yellow]")
        return
    render_table(rows, console)


if __name__ == "__main__":
    app()
