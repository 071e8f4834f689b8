"""Translate service exceptions into plain-text HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from ngpanel.errors import (
    AlreadyEnabledError,
    AlreadyExistsError,
    InvalidNameError,
    NotEnabledError,
    NotFoundError,
    PanelError,
    ValidationFailedError,
)

log = logging.getLogger(__name__)

_STATUS = {
    InvalidNameError: 400,
    AlreadyExistsError: 400,
    AlreadyEnabledError: 400,
    NotEnabledError: 400,
    ValidationFailedError: 400,
    NotFoundError: 404,
}


def status_for(exc: PanelError) -> int:
    for cls, code in _STATUS.items():
        if isinstance(exc, cls):
            return code
    return 500


async def panel_error_handler(request: Request, exc: PanelError) -> PlainTextResponse:
    code = status_for(exc)
    if code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=code)


def install(app: FastAPI) -> None:
    app.add_exception_handler(PanelError, panel_error_handler)
