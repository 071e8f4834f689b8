"""Tarball snapshots of the NGINX tree and the panel's data directory."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

from ngpanel_common import BACKUP_SUFFIX, PanelConfig

from ngpanel.errors import NotFoundError, ProcessFailureError
from ngpanel.services.names import check_backup_name
from ngpanel.services.versions import format_version_id

log = logging.getLogger(__name__)


def _publish(partial: Path, backup_dir: Path, moment: datetime) -> str:
    """Hard-link ``partial`` under the first free timestamped name. Archives are never overwritten."""
    while True:
        file_name = format_version_id(moment) + BACKUP_SUFFIX
        try:
            os.link(partial, backup_dir / file_name)
        except FileExistsError:
            moment += timedelta(milliseconds=1)
            continue
        return file_name


def create_backup(cfg: PanelConfig) -> str:
    """Archive ``nginx_conf_root`` and ``data_dir``. Returns the archive file name.

    The archive is built outside the data directory and moved into
    ``backups/`` once tar succeeds, so it never contains itself. Two backups
    started in the same millisecond get distinct names.
    """
    cfg.backup_dir.mkdir(parents=True, exist_ok=True)
    moment = datetime.now(timezone.utc)
    fd, tmp = tempfile.mkstemp(suffix=".tar.gz")
    os.close(fd)
    try:
        proc = subprocess.run(
            ["tar", "-czf", tmp, str(cfg.nginx_conf_root), str(cfg.data_dir)],
            capture_output=True,
            text=True,
            check=False,
        )
        if proc.returncode != 0:
            log.error("Backup failed (exit %s): %s", proc.returncode, proc.stderr)
            raise ProcessFailureError(f"Backup failed:\n{proc.stderr}")
        partial = cfg.backup_dir / f".{os.path.basename(tmp)}.partial"
        shutil.move(tmp, partial)
        try:
            file_name = _publish(partial, cfg.backup_dir, moment)
        finally:
            partial.unlink(missing_ok=True)
    except OSError as exc:
        raise ProcessFailureError(f"Backup failed:\n{exc}") from exc
    finally:
        if os.path.exists(tmp):
            os.unlink(tmp)
    log.info("Created backup %s", file_name)
    return file_name


def list_backups(cfg: PanelConfig) -> list[str]:
    """Archive names, newest first."""
    cfg.backup_dir.mkdir(parents=True, exist_ok=True)
    return sorted((p.name for p in cfg.backup_dir.iterdir() if p.name.endswith(".tar.gz")), reverse=True)


def backup_path(cfg: PanelConfig, name: str) -> Path:
    path = cfg.backup_dir / check_backup_name(name)
    if not path.is_file():
        raise NotFoundError("Not found.")
    return path
