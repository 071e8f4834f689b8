"""Site catalogue: listing, reading and creating config files."""

from __future__ import annotations

import logging

from ngpanel_common import PanelConfig, SiteInfo

from ngpanel.errors import AlreadyExistsError, IOFailureError, NotFoundError
from ngpanel.services import templates, toggler, vhost_renderer
from ngpanel.services.names import available_path, check_site_name, is_valid_site_name
from ngpanel.services.versions import decode_config

log = logging.getLogger(__name__)


def list_sites(cfg: PanelConfig) -> list[SiteInfo]:
    try:
        names = sorted(p.name for p in cfg.available_dir.iterdir())
    except OSError as exc:
        log.error("Failed to read %s: %s", cfg.available_dir, exc)
        raise IOFailureError("Failed to read directory.") from exc
    return [
        SiteInfo(
            name=name,
            enabled=toggler.is_enabled(cfg, name),
            path=str(available_path(cfg, name)),
        )
        for name in names
        if is_valid_site_name(name)
    ]


def read_site(cfg: PanelConfig, name: str) -> str:
    path = available_path(cfg, name)
    if not path.is_file():
        raise NotFoundError("File not found")
    try:
        return decode_config(path.read_bytes())
    except OSError as exc:
        log.error("Failed to read %s: %s", path, exc)
        raise IOFailureError("Failed to read file.") from exc


def initial_content(cfg: PanelConfig, name: str, template_id: str | None = None) -> str:
    """Content for a new site: the chosen template, else the default skeleton."""
    content = ""
    if template_id:
        tpl = templates.find_template(cfg, template_id)
        if tpl is not None:
            content = templates.render_template(tpl, name)
        else:
            log.warning("Unknown template %r, using default skeleton", template_id)
    return content or vhost_renderer.render_default_site(name)


def create_site(cfg: PanelConfig, name: str, template_id: str | None = None) -> str:
    """Create the config file for ``name``. Returns the written content."""
    check_site_name(name)
    path = available_path(cfg, name)
    if path.exists():
        raise AlreadyExistsError("File already exists.")
    content = initial_content(cfg, name, template_id)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError as exc:
        raise AlreadyExistsError("File already exists.") from exc
    except OSError as exc:
        log.error("Failed to create %s: %s", path, exc)
        raise IOFailureError("Failed to create file.") from exc
    log.info("Created site %s", name)
    return content
