"""Site config management commands."""

from __future__ import annotations

import getpass
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ngpanel.commands import fail
from ngpanel.config import get_config
from ngpanel.errors import PanelError
from ngpanel.services import sites, toggler
from ngpanel.services.lifecycle import ConfigLifecycle
from ngpanel.services.versions import VersionStore

app = typer.Typer(no_args_is_help=True)
console = Console()


def _get_actor() -> str:
    return os.environ.get("NGPANEL_ACTOR") or getpass.getuser()


@app.command(name="list")
def list_sites() -> None:
    """List all sites in sites-available."""
    cfg = get_config()
    try:
        rows = sites.list_sites(cfg)
    except PanelError as exc:
        fail(exc)

    table = Table(title="Sites")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled", style="green")
    table.add_column("Path")
    for site in rows:
        table.add_row(site.name, "yes" if site.enabled else "no", site.path)
    console.print(table)


@app.command()
def show(name: str = typer.Argument(help="Site name")) -> None:
    """Display the config for a site."""
    try:
        content = sites.read_site(get_config(), name)
    except PanelError as exc:
        fail(exc)
    console.print(Syntax(content, "nginx", theme="monokai"))


@app.command()
def create(
    name: str = typer.Argument(help="Site name (e.g. example.com)"),
    template: Optional[str] = typer.Option(None, help="Template id from templates.json"),
) -> None:
    """Create a new site config from a template or the default skeleton."""
    try:
        sites.create_site(get_config(), name, template)
    except PanelError as exc:
        fail(exc)
    console.print(f"[green]Site created:[/green] {name}")


@app.command()
def save(
    name: str = typer.Argument(help="Site name"),
    file: Path = typer.Option(..., "--file", "-f", exists=True, dir_okay=False, help="File with the new content"),
) -> None:
    """Replace a site's config, keeping it only if nginx -t passes."""
    cfg = get_config()
    content = file.read_bytes()
    try:
        result = ConfigLifecycle(cfg).commit(name, content, actor=_get_actor(), source_address="cli")
    except PanelError as exc:
        fail(exc)
    console.print("[green]Saved and nginx -t OK.[/green]")
    if result.version:
        console.print(f"  Previous content kept as version {result.version.id}")


@app.command()
def enable(name: str = typer.Argument(help="Site name")) -> None:
    """Link a site into sites-enabled."""
    try:
        toggler.enable(get_config(), name)
    except PanelError as exc:
        fail(exc)
    console.print(f"[green]Site enabled:[/green] {name}")


@app.command()
def disable(name: str = typer.Argument(help="Site name")) -> None:
    """Remove a site's sites-enabled link."""
    try:
        toggler.disable(get_config(), name)
    except PanelError as exc:
        fail(exc)
    console.print(f"[green]Site disabled:[/green] {name}")


@app.command()
def versions(name: str = typer.Argument(help="Site name")) -> None:
    """List saved versions of a site, newest first."""
    try:
        records = VersionStore(get_config()).list(name)
    except PanelError as exc:
        fail(exc)

    table = Table(title=f"Versions of {name}")
    table.add_column("Id", style="cyan")
    table.add_column("User")
    table.add_column("Address")
    for r in records:
        table.add_row(r.id, r.user, r.source_address)
    console.print(table)


@app.command()
def version(
    name: str = typer.Argument(help="Site name"),
    version_id: str = typer.Argument(help="Version id"),
) -> None:
    """Display the content of a saved version."""
    try:
        content = VersionStore(get_config()).fetch(name, version_id)
    except PanelError as exc:
        fail(exc)
    console.print(Syntax(content, "nginx", theme="monokai"))
