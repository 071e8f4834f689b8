"""NGINX test and reload commands."""

from __future__ import annotations

import typer
from rich.console import Console

from ngpanel_common import CommandResult

from ngpanel.config import get_config
from ngpanel.services import nginx

app = typer.Typer(no_args_is_help=True)
console = Console()


def _report(result: CommandResult) -> None:
    console.print(result.render(), markup=False, highlight=False)
    if not result.ok:
        raise typer.Exit(result.exit_code)


@app.command()
def test() -> None:
    """Run nginx -t."""
    _report(nginx.check_config(get_config()))


@app.command()
def reload() -> None:
    """Reload NGINX (systemctl when USE_SYSTEMCTL=true)."""
    _report(nginx.reload(get_config()))
