"""Root Typer application for the ngpanel CLI."""

from __future__ import annotations

import logging

import typer

from ngpanel.commands import backup, logs, nginx, site, user

app = typer.Typer(
    name="ngpanel",
    help="NGINX panel — edit, validate, enable and version site configs.",
    no_args_is_help=True,
)

app.add_typer(site.app, name="site", help="Site config files and their versions.")
app.add_typer(nginx.app, name="nginx", help="Test and reload NGINX.")
app.add_typer(backup.app, name="backup", help="Configuration backups.")
app.add_typer(user.app, name="user", help="Panel accounts.")
app.command(name="logs")(logs.logs)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log service activity")) -> None:
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    app()
