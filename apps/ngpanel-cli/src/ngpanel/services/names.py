"""Validation of path segments taken from user input."""

from __future__ import annotations

import re
from pathlib import Path

from ngpanel_common import BACKUP_NAME_PATTERN, SITE_NAME_PATTERN, VERSION_ID_PATTERN, PanelConfig

from ngpanel.errors import InvalidNameError

_SITE_RE = re.compile(SITE_NAME_PATTERN)
_VERSION_RE = re.compile(VERSION_ID_PATTERN)
_BACKUP_RE = re.compile(BACKUP_NAME_PATTERN)

_DOT_NAMES = {".", ".."}


def is_valid_site_name(name: object) -> bool:
    return isinstance(name, str) and bool(_SITE_RE.fullmatch(name)) and name not in _DOT_NAMES


def check_site_name(name: object) -> str:
    if not is_valid_site_name(name):
        raise InvalidNameError("Invalid site name.")
    return name  # type: ignore[return-value]


def check_version_id(version_id: object) -> str:
    if not isinstance(version_id, str) or not _VERSION_RE.fullmatch(version_id):
        raise InvalidNameError("Invalid version id.")
    return version_id


def check_backup_name(name: object) -> str:
    if not isinstance(name, str) or not _BACKUP_RE.fullmatch(name) or name.startswith("."):
        raise InvalidNameError("Invalid backup name.")
    return name


def available_path(cfg: PanelConfig, name: str) -> Path:
    return cfg.available_dir / check_site_name(name)


def enabled_path(cfg: PanelConfig, name: str) -> Path:
    return cfg.enabled_dir / check_site_name(name)
