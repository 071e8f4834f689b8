"""Site activation via symlinks from sites-enabled to sites-available."""

from __future__ import annotations

import logging
import os

from ngpanel_common import PanelConfig

from ngpanel.errors import AlreadyEnabledError, AlreadyExistsError, IOFailureError, NotEnabledError, NotFoundError
from ngpanel.services.names import available_path, enabled_path

log = logging.getLogger(__name__)


def is_enabled(cfg: PanelConfig, site: str) -> bool:
    """True only for a symlink; a regular file in sites-enabled is not managed activation."""
    return enabled_path(cfg, site).is_symlink()


def enable(cfg: PanelConfig, site: str) -> None:
    src = available_path(cfg, site)
    dest = enabled_path(cfg, site)
    if not src.is_file():
        raise NotFoundError("Source file not found.")
    if dest.is_symlink():
        raise AlreadyEnabledError("Site already enabled.")
    if os.path.lexists(dest):
        raise AlreadyExistsError(f"{dest} exists and is not a symlink.")
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.symlink_to(src)
    except OSError as exc:
        log.error("Failed to enable %s: %s", site, exc)
        raise IOFailureError("Failed to enable site.") from exc
    log.info("Enabled %s", site)


def disable(cfg: PanelConfig, site: str) -> None:
    """Remove the enabled link, never the config it points at."""
    dest = enabled_path(cfg, site)
    if not dest.is_symlink():
        raise NotEnabledError("Site not enabled.")
    try:
        dest.unlink()
    except OSError as exc:
        log.error("Failed to disable %s: %s", site, exc)
        raise IOFailureError("Failed to disable site.") from exc
    log.info("Disabled %s", site)
