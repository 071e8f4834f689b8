"""API configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    session_secret: str = "change_this_secret"
    session_cookie: str = "nginxpanel.sid"
    https_only: bool = False
    cors_origins: list[str] = []
    host: str = "0.0.0.0"
    port: int = 5005
    # Seeds users.json with one admin when it is empty
    bootstrap_username: str = "admin"
    bootstrap_password_hash: str = ""

    model_config = {"env_prefix": "NGPANEL_"}
