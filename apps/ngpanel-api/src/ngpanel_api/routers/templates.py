"""Template listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ngpanel_common import PanelConfig

from ngpanel.services.templates import load_templates
from ngpanel_api.deps import Identity, get_identity, get_panel_config

router = APIRouter(tags=["templates"])


@router.get("/templates")
def list_templates(
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    return [t.model_dump() for t in load_templates(cfg)]
