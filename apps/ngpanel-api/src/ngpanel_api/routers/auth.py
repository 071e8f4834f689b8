"""Login/logout pages and the current-user endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ngpanel_common import PanelConfig

from ngpanel.services.users import UserStore
from ngpanel_api import pages
from ngpanel_api.deps import Identity, get_identity, get_panel_config, session_identity

router = APIRouter(tags=["auth"])
api_router = APIRouter(tags=["auth"])

log = logging.getLogger(__name__)

@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request, error: str | None = None):
    if session_identity(request) is not None:
        return RedirectResponse("/", status_code=303)
    return HTMLResponse(pages.render_login(error=bool(error)))


@router.post("/login")
def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    cfg: PanelConfig = Depends(get_panel_config),
):
    if not username or not password:
        return RedirectResponse("/login?error=1", status_code=303)

    user = UserStore(cfg).authenticate(username, password)
    if user is None:
        log.warning("Failed login for %r from %s", username, request.client.host if request.client else "?")
        return RedirectResponse("/login?error=1", status_code=303)

    request.session.clear()
    request.session.update({"authenticated": True, "username": user.username, "role": user.role.value})
    log.info("User %s logged in", user.username)
    return RedirectResponse("/", status_code=303)


@router.post("/logout")
def logout(request: Request, identity: Identity = Depends(get_identity)):
    request.session.clear()
    return RedirectResponse("/login", status_code=303)


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    identity = session_identity(request)
    if identity is None:
        return RedirectResponse("/login", status_code=303)
    return HTMLResponse(pages.render_index(identity.username, identity.role.value))


@api_router.get("/me")
def me(identity: Identity = Depends(get_identity)):
    return {"username": identity.username, "role": identity.role.value}
