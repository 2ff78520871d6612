"""
lists_backend.api.errors

Rendering of application errors as HTTP responses.

Responsibilities:
- Map each AppError kind to its status code with a `{"error": msg}` body.
- Log the hidden cause; never send it to the client.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lists_backend.errors import AppError, UnauthorizedError
from lists_backend.observability.logging import get_logger

log = get_logger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    cause = repr(exc.cause) if exc.cause is not None else None
    if exc.status_code >= 500:
        log.error("request_failed", status=exc.status_code, error=exc.msg, cause=cause)
    else:
        log.info("request_rejected", status=exc.status_code, error=exc.msg, cause=cause)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(status_code=exc.status_code, content={"error": exc.msg}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
