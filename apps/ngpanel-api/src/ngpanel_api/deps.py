"""Request-scoped dependencies: configuration, identity and role checks."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status

from ngpanel_common import PanelConfig, Role


@dataclass(frozen=True)
class Identity:
    username: str
    role: Role


def get_panel_config(request: Request) -> PanelConfig:
    return request.app.state.panel_config


def client_address(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
    if forwarded:
        return forwarded
    return request.client.host if request.client else "unknown"


def session_identity(request: Request) -> Identity | None:
    session = request.session
    if not session.get("authenticated"):
        return None
    try:
        role = Role(session.get("role"))
    except ValueError:
        return None
    return Identity(username=session.get("username", ""), role=role)


def get_identity(request: Request) -> Identity:
    identity = session_identity(request)
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated.")
    return identity


def require_role(required: Role):
    """Dependency factory rejecting sessions below ``required``."""

    def _check(identity: Identity = Depends(get_identity)) -> Identity:
        if not identity.role.allows(required):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden: insufficient permissions.",
            )
        return identity

    return _check
