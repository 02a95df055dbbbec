"""
linkboard.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide request-scoped DB sessions from the app's sessionmaker.
- Forward verified claims to the store when configured (PostgreSQL RLS).
- Bind the caller's identity into the logging context.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import structlog
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from linkboard.auth.deps import get_identity, get_provider_session
from linkboard.auth.models import Identity, ProviderSession
from linkboard.db.session import forward_claims
from linkboard.settings import Settings, get_settings


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created during app startup in `linkboard.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is managed by the service layer.
    async with session_factory() as session:
        yield session


async def owned_db_session(
    session: AsyncSession = Depends(db_session),
    provider: ProviderSession = Depends(get_provider_session),
    settings: Settings = Depends(get_settings),
) -> AsyncSession:
    if settings.forward_claims_to_store and provider.user_id:
        await forward_claims(session, provider.claims)
    return session


async def caller_identity(identity: Identity | None = Depends(get_identity)) -> Identity | None:
    # Bind the caller for log lines emitted by the handler.
    if identity is not None:
        structlog.contextvars.bind_contextvars(user_id=identity.user_id)
    return identity


# --- Module Notes -----------------------------------------------------------
# Routers pass `caller_identity` straight into services; the services enforce its presence.
