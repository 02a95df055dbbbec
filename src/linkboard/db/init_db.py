"""
linkboard.db.init_db

Create the schema for local development and tests.
Production runs the Alembic migrations instead.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from linkboard.db import models  # noqa: F401  # registers tables on Base.metadata
from linkboard.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
