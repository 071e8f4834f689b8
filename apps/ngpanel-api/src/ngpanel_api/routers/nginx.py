"""NGINX test and reload endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ngpanel_common import PanelConfig, Role

from ngpanel.services import nginx
from ngpanel_api.deps import Identity, get_identity, get_panel_config, require_role

router = APIRouter(tags=["nginx"])


@router.post("/nginx/test", response_class=PlainTextResponse)
def test_nginx(
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    return PlainTextResponse(nginx.check_config(cfg).render())


@router.post("/nginx/reload", response_class=PlainTextResponse)
def reload_nginx(
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(require_role(Role.ADMIN)),
):
    return PlainTextResponse(nginx.reload(cfg).render())
