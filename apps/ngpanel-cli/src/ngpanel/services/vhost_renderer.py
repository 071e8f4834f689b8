"""Jinja2-based renderer for the built-in server block skeleton."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape([]),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_default_site(name: str) -> str:
    """Render a static-files server block for a new site called ``name``."""
    env = _get_env()
    template = env.get_template("default_site.conf.j2")
    return template.render(name=name)
