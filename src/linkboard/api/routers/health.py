"""
linkboard.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Liveness probe (`/healthz`).
- Readiness probe (`/readyz`): the store answers and both tables exist.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from linkboard.api.deps import db_session
from linkboard.db.models import Analysis, Profile

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    try:
        await session.execute(select(Profile.id).limit(1))
        await session.execute(select(Analysis.id).limit(1))
    except SQLAlchemyError as e:
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Database setup required"
        ) from e
    return {"status": "ready"}
