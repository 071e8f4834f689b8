"""NGINX log tail endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from ngpanel_common import DEFAULT_LOG_LINES, PanelConfig

from ngpanel.services import logs
from ngpanel_api.deps import Identity, get_identity, get_panel_config

router = APIRouter(tags=["logs"])


@router.get("/logs", response_class=PlainTextResponse)
def tail_logs(
    type: str = Query(default="access"),
    lines: int = Query(default=DEFAULT_LOG_LINES),
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    return PlainTextResponse(logs.tail(cfg, type, lines))
