"""Tail of the NGINX access/error logs."""

from __future__ import annotations

import logging
from pathlib import Path

from ngpanel_common import DEFAULT_LOG_LINES, MAX_LOG_LINES, PanelConfig

from ngpanel.errors import NotFoundError, ProcessFailureError
from ngpanel.services.nginx import run_command

log = logging.getLogger(__name__)


def log_path(cfg: PanelConfig, kind: str) -> Path:
    return cfg.error_log if kind == "error" else cfg.access_log


def tail(cfg: PanelConfig, kind: str = "access", lines: int = DEFAULT_LOG_LINES) -> str:
    path = log_path(cfg, kind)
    if not path.exists():
        raise NotFoundError("Log file not found.")
    lines = max(1, min(lines, MAX_LOG_LINES))
    result = run_command(["tail", "-n", str(lines), str(path)])
    if not result.ok:
        log.error("tail %s failed: %s", path, result.stderr)
        raise ProcessFailureError("Failed to read logs.")
    return result.stdout
