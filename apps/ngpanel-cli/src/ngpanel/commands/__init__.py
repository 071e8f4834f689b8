"""CLI command groups."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from ngpanel.errors import PanelError

_err = Console(stderr=True)


def fail(exc: PanelError) -> NoReturn:
    _err.print(f"[red]Error:[/red] {escape(exc.message)}")
    raise typer.Exit(exc.exit_code)
