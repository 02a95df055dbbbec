"""
linkboard.db.repositories.analyses

Repository for `Analysis` entities (many per owner).
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import desc

from linkboard.auth.models import Identity
from linkboard.db.models import Analysis
from linkboard.db.repositories.owned import OwnedRepo, store_errors


class AnalysisRepo(OwnedRepo[Analysis]):
    model = Analysis

    async def list(self, owner: Identity) -> list[Analysis]:
        # Newest first, matching the dashboard listing.
        stmt = self._scoped(owner).order_by(desc(Analysis.created_at))
        with store_errors():
            return list((await self._session.execute(stmt)).scalars().all())

    async def get(self, owner: Identity, analysis_id: uuid.UUID) -> Analysis | None:
        return await self._one(owner, analysis_id)

    async def insert(
        self,
        owner: Identity,
        *,
        title: str,
        description: str | None,
        status: str,
        data: dict[str, Any],
    ) -> Analysis:
        return await self._insert(
            owner,
            {"title": title, "description": description, "status": status, "data": data},
        )

    async def update(
        self,
        owner: Identity,
        analysis_id: uuid.UUID,
        *,
        title: str,
        description: str | None,
        status: str,
        data: dict[str, Any],
    ) -> Analysis:
        return await self._update(
            owner,
            {"title": title, "description": description, "status": status, "data": data},
            analysis_id,
        )

    async def delete(self, owner: Identity, analysis_id: uuid.UUID) -> int:
        return await self._delete(owner, analysis_id)


# --- Module Notes -----------------------------------------------------------
# The (user_id, created_at) index on `analyses` backs `list`.
