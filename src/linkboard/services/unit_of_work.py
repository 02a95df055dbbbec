from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.db.repositories.owned import store_errors
from linkboard.errors import StoreFault


@asynccontextmanager
async def write_scope(session: AsyncSession) -> AsyncIterator[None]:
    # Single-row writes: commit on success, roll back and re-raise on any store fault.
    try:
        yield
        with store_errors():
            await session.commit()
    except StoreFault:
        await session.rollback()
        raise
