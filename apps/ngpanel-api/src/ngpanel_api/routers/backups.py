"""Backup archive endpoints (admin only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from ngpanel_common import PanelConfig, Role

from ngpanel.services import backup
from ngpanel_api.deps import get_panel_config, require_role

router = APIRouter(tags=["backups"], dependencies=[Depends(require_role(Role.ADMIN))])


@router.post("/backup")
def create_backup(cfg: PanelConfig = Depends(get_panel_config)):
    return {"ok": True, "file": backup.create_backup(cfg)}


@router.get("/backup")
def list_backups(cfg: PanelConfig = Depends(get_panel_config)):
    return backup.list_backups(cfg)


@router.get("/backup/{name}")
def download_backup(name: str, cfg: PanelConfig = Depends(get_panel_config)):
    path = backup.backup_path(cfg, name)
    return FileResponse(path, media_type="application/gzip", filename=name)
