"""
lists_backend.api.app

FastAPI app factory for the Lists Backend service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from lists_backend import __version__
from lists_backend.api.errors import register_error_handlers
from lists_backend.api.routers.auth import router as auth_router
from lists_backend.api.routers.health import router as health_router
from lists_backend.api.routers.lists import router as lists_router
from lists_backend.api.routers.users import router as users_router
from lists_backend.db.init_db import init_db
from lists_backend.db.session import create_engine, create_sessionmaker
from lists_backend.observability.logging import configure_logging, get_logger
from lists_backend.observability.middleware import RequestContextMiddleware
from lists_backend.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create the documents table automatically.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Lists Backend",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(lists_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; rules live in services, storage in db/.
