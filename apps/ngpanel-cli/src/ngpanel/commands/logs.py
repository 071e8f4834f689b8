"""NGINX log tail command."""

from __future__ import annotations

import typer
from rich.console import Console

from ngpanel_common import DEFAULT_LOG_LINES

from ngpanel.commands import fail
from ngpanel.config import get_config
from ngpanel.errors import PanelError
from ngpanel.services import logs as log_service

console = Console()


def logs(
    kind: str = typer.Option("access", "--type", help="access or error"),
    lines: int = typer.Option(DEFAULT_LOG_LINES, help="Number of lines"),
) -> None:
    """Show the last lines of the NGINX access or error log."""
    try:
        output = log_service.tail(get_config(), kind, lines)
    except PanelError as exc:
        fail(exc)
    console.print(output, markup=False, highlight=False, end="")
