"""Site config endpoints: listing, editing, activation and version history."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from ngpanel_common import PanelConfig, Role

from ngpanel.services import sites, toggler
from ngpanel.services.lifecycle import ConfigLifecycle
from ngpanel.services.names import check_site_name
from ngpanel.services.versions import VersionStore
from ngpanel_api.deps import Identity, client_address, get_identity, get_panel_config, require_role

router = APIRouter(tags=["sites"])


class CreateSiteRequest(BaseModel):
    name: str
    templateId: str | None = None


@router.get("/sites")
def list_sites(
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    return [s.model_dump() for s in sites.list_sites(cfg)]


@router.post("/sites")
def create_site(
    payload: CreateSiteRequest,
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    sites.create_site(cfg, payload.name, payload.templateId)
    return PlainTextResponse(f"Site created: {payload.name}")


@router.get("/sites/{name}", response_class=PlainTextResponse)
def get_site(
    name: str,
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    return PlainTextResponse(sites.read_site(cfg, name))


@router.get("/sites/{name}/meta")
def site_meta(
    name: str,
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    check_site_name(name)
    return {"name": name, "enabled": toggler.is_enabled(cfg, name)}


@router.put("/sites/{name}", response_class=PlainTextResponse)
async def save_site(
    name: str,
    request: Request,
    cfg: PanelConfig = Depends(get_panel_config),
    identity: Identity = Depends(require_role(Role.OPERATOR)),
):
    """Replace the config; 400 with nginx -t output if it does not validate."""
    check_site_name(name)
    content = await request.body()
    await run_in_threadpool(
        ConfigLifecycle(cfg).commit,
        name,
        content,
        identity.username,
        client_address(request),
    )
    return PlainTextResponse("Saved and nginx -t OK.")


@router.post("/sites/{name}/enable", response_class=PlainTextResponse)
def enable_site(
    name: str,
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(require_role(Role.ADMIN)),
):
    toggler.enable(cfg, name)
    return PlainTextResponse("Site enabled.")


@router.post("/sites/{name}/disable", response_class=PlainTextResponse)
def disable_site(
    name: str,
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(require_role(Role.ADMIN)),
):
    toggler.disable(cfg, name)
    return PlainTextResponse("Site disabled.")


@router.get("/sites/{name}/versions")
def list_versions(
    name: str,
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    return [r.to_index() for r in VersionStore(cfg).list(name)]


@router.get("/sites/{name}/versions/{version_id}", response_class=PlainTextResponse)
def get_version(
    name: str,
    version_id: str,
    cfg: PanelConfig = Depends(get_panel_config),
    _: Identity = Depends(get_identity),
):
    return PlainTextResponse(VersionStore(cfg).fetch(name, version_id))
