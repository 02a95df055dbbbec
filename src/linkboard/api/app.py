"""
linkboard.api.app

FastAPI app factory for the linkboard service.

Responsibilities:
- Build the FastAPI application and register routers, middleware and error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory, provider HTTP client).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from linkboard.api.errors import register_error_handlers
from linkboard.api.routers.analyses import router as analyses_router
from linkboard.api.routers.dashboard import router as dashboard_router
from linkboard.api.routers.dev_auth import router as dev_auth_router
from linkboard.api.routers.health import router as health_router
from linkboard.api.routers.plan import router as plan_router
from linkboard.api.routers.profile import router as profile_router
from linkboard.auth.provider import IdentityProviderClient, build_provider_http
from linkboard.db.init_db import init_db
from linkboard.db.session import create_engine, create_sessionmaker
from linkboard.observability.logging import configure_logging, get_logger
from linkboard.observability.middleware import RequestContextMiddleware
from linkboard.settings import Settings, get_settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, json_logs=settings.log_json
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schema comes from Alembic migrations.
            await init_db(engine)

        provider_http = build_provider_http(settings)
        app.state.identity_provider = (
            IdentityProviderClient(settings=settings, http=provider_http)
            if provider_http is not None
            else None
        )
        try:
            yield
        finally:
            if provider_http is not None:
                await provider_http.aclose()
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="linkboard",
        version="0.1.0",
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    # Every dependency sees the settings this app was built with.
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(plan_router)
    app.include_router(profile_router)
    app.include_router(analyses_router)
    app.include_router(dashboard_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Tests enter `app.router.lifespan_context(app)` explicitly; httpx's ASGITransport
# does not run lifespan events.
