"""Panel user management commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from ngpanel_common import Role

from ngpanel.config import get_config
from ngpanel.services.users import UserStore

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command()
def add(
    username: str = typer.Argument(help="Login name"),
    role: Role = typer.Option(Role.VIEWER, help="viewer, operator or admin"),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True, help="Password"),
) -> None:
    """Create or replace a panel user."""
    UserStore(get_config()).add_user(username, password, role)
    console.print(f"[green]Saved user[/green] {username} ({role.value})")


@app.command(name="list")
def list_users() -> None:
    """List panel users and their roles."""
    table = Table(title="Panel users")
    table.add_column("Username", style="cyan")
    table.add_column("Role", style="green")
    for user in UserStore(get_config()).load():
        table.add_row(user.username, user.role.value)
    console.print(table)
