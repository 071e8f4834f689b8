"""Jinja2 rendering for the login and panel pages."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_login(error: bool = False) -> str:
    return _get_env().get_template("login.html.j2").render(error=error)


def render_index(username: str, role: str) -> str:
    """Render the single-page panel shell; ``static/app.js`` drives it."""
    return _get_env().get_template("index.html.j2").render(username=username, role=role)
