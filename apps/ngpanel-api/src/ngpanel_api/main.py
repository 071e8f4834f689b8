"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from ngpanel_common import PanelConfig

from ngpanel.config import get_config
from ngpanel.services.users import UserStore
from ngpanel_api import errors
from ngpanel_api.config import Settings
from ngpanel_api.routers import auth, backups, logs, nginx, sites, templates

log = logging.getLogger(__name__)

_STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg: PanelConfig = app.state.panel_config
    settings: Settings = app.state.settings
    cfg.ensure_data_dirs()
    UserStore(cfg).ensure_bootstrap_admin(settings.bootstrap_username, settings.bootstrap_password_hash)
    if settings.session_secret == Settings.model_fields["session_secret"].default:
        log.warning("NGPANEL_SESSION_SECRET is not set; using the built-in default")
    yield


def create_app(panel_config: PanelConfig | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="Nginx Panel",
        description="Edit, validate, enable and version NGINX site configs",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.panel_config = panel_config or get_config()
    app.state.settings = settings

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
        same_site="lax",
        https_only=settings.https_only,
    )
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    errors.install(app)

    app.include_router(auth.router)
    app.include_router(auth.api_router, prefix="/api")
    app.include_router(sites.router, prefix="/api")
    app.include_router(nginx.router, prefix="/api")
    app.include_router(backups.router, prefix="/api")
    app.include_router(templates.router, prefix="/api")
    app.include_router(logs.router, prefix="/api")

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    if _STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")

    return app


app = create_app()


def run():
    import uvicorn

    settings = Settings()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("ngpanel_api.main:app", host=settings.host, port=settings.port)
