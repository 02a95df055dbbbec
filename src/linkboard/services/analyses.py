"""
linkboard.services.analyses

Analysis actions: many analyses per identity.

Responsibilities:
- list / get / create / update / delete analyses scoped to the caller.
- Apply defaults (status `draft`, empty `data`) and validation before touching the store.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.auth.identity import require_identity
from linkboard.auth.models import Identity
from linkboard.db.models import Analysis
from linkboard.db.repositories.analyses import AnalysisRepo
from linkboard.observability.logging import get_logger
from linkboard.services.forms import AnalysisFormData
from linkboard.services.invalidation import Mutation
from linkboard.services.unit_of_work import write_scope
from linkboard.services.validation import (
    ANALYSIS_DESCRIPTION,
    ANALYSIS_TITLE,
    validate_field,
    validate_status,
)

log = get_logger(__name__)


def _clean(form: AnalysisFormData) -> dict[str, Any]:
    return {
        "title": validate_field(form.title, ANALYSIS_TITLE),
        "description": validate_field(form.description, ANALYSIS_DESCRIPTION),
        "status": validate_status(form.status),
        "data": dict(form.data or {}),
    }


class AnalysisService:
    def __init__(self, *, session: AsyncSession, repo: AnalysisRepo | None = None) -> None:
        self._session = session
        self._analyses = repo or AnalysisRepo(session)

    async def list(self, identity: Identity | None) -> list[Analysis]:
        owner = require_identity(identity)
        return await self._analyses.list(owner)

    async def get(self, identity: Identity | None, analysis_id: uuid.UUID) -> Analysis | None:
        owner = require_identity(identity)
        return await self._analyses.get(owner, analysis_id)

    async def create(
        self, identity: Identity | None, form: AnalysisFormData
    ) -> Mutation[Analysis]:
        owner = require_identity(identity)
        values = _clean(form)

        async with write_scope(self._session):
            analysis = await self._analyses.insert(owner, **values)
        log.info("analysis_created", user_id=owner.user_id, analysis_id=str(analysis.id))
        return Mutation(analysis)

    async def update(
        self, identity: Identity | None, analysis_id: uuid.UUID, form: AnalysisFormData
    ) -> Mutation[Analysis]:
        owner = require_identity(identity)
        values = _clean(form)

        async with write_scope(self._session):
            analysis = await self._analyses.update(owner, analysis_id, **values)
        log.info("analysis_updated", user_id=owner.user_id, analysis_id=str(analysis_id))
        return Mutation(analysis)

    async def delete(self, identity: Identity | None, analysis_id: uuid.UUID) -> Mutation[None]:
        owner = require_identity(identity)
        async with write_scope(self._session):
            deleted = await self._analyses.delete(owner, analysis_id)
        log.info("analysis_deleted", user_id=owner.user_id, analysis_id=str(analysis_id), rows=deleted)
        return Mutation(None)
