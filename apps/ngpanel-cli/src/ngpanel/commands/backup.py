"""Backup archive commands."""

from __future__ import annotations

import typer
from rich.console import Console

from ngpanel.commands import fail
from ngpanel.config import get_config
from ngpanel.errors import PanelError
from ngpanel.services import backup

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command()
def create() -> None:
    """Archive /etc/nginx and the panel data directory."""
    cfg = get_config()
    try:
        name = backup.create_backup(cfg)
    except PanelError as exc:
        fail(exc)
    console.print(f"[green]Backup created:[/green] {cfg.backup_dir / name}")


@app.command(name="list")
def list_backups() -> None:
    """List backup archives, newest first."""
    for name in backup.list_backups(get_config()):
        console.print(f"  {name}")
