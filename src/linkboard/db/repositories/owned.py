"""
linkboard.db.repositories.owned

Shared base for repositories whose rows belong to exactly one identity.

Responsibilities:
- Build owner-scoped statements (`user_id == owner`, optionally `id == record_id`).
- Stamp the owner on insert; refuse to touch rows outside the owner's scope.
- Translate SQLAlchemy errors into `StoreFault`.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.auth.models import Identity
from linkboard.db.models import Analysis, Profile, utcnow
from linkboard.errors import StoreFault

ModelT = TypeVar("ModelT", Profile, Analysis)


@contextmanager
def store_errors() -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        # DBAPI errors carry the driver's own message on `.orig`.
        raise StoreFault(str(getattr(e, "orig", None) or e)) from e


class OwnedRepo(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _scoped(self, owner: Identity, record_id: uuid.UUID | None = None) -> Select[tuple[ModelT]]:
        stmt = select(self.model).where(self.model.user_id == owner.user_id)
        if record_id is not None:
            stmt = stmt.where(self.model.id == record_id)
        return stmt

    async def _one(self, owner: Identity, record_id: uuid.UUID | None = None) -> ModelT | None:
        with store_errors():
            # More than one row is a fault (MultipleResultsFound), not "absent".
            return (await self._session.execute(self._scoped(owner, record_id))).scalar_one_or_none()

    async def _insert(self, owner: Identity, values: dict[str, Any]) -> ModelT:
        row = self.model(user_id=owner.user_id, **values)
        with store_errors():
            self._session.add(row)
            await self._session.flush()
        return row

    async def _update(
        self, owner: Identity, values: dict[str, Any], record_id: uuid.UUID | None = None
    ) -> ModelT:
        with store_errors():
            stmt = self._scoped(owner, record_id).with_for_update()
            row = (await self._session.execute(stmt)).scalar_one_or_none()
            if row is None:
                raise StoreFault(f"No {self.model.__tablename__} row matched for update")
            for key, value in values.items():
                setattr(row, key, value)
            row.updated_at = utcnow()
            await self._session.flush()
        return row

    async def _delete(self, owner: Identity, record_id: uuid.UUID | None = None) -> int:
        stmt = delete(self.model).where(self.model.user_id == owner.user_id)
        if record_id is not None:
            stmt = stmt.where(self.model.id == record_id)
        with store_errors():
            result = await self._session.execute(stmt)
        return result.rowcount or 0


# --- Module Notes -----------------------------------------------------------
# Subclasses expose the public, kind-specific signatures (singular vs plural).
