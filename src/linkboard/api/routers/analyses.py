"""
linkboard.api.routers.analyses

The caller's analyses. Gated behind the pro plan.

Responsibilities:
- CRUD over `/v1/analyses`, always scoped to the calling identity.
- A missing (or foreign) analysis is a 404 on read; on update the store fault propagates.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from linkboard.api.deps import caller_identity, owned_db_session
from linkboard.api.revalidate import emit_invalidations
from linkboard.api.schemas import AnalysisResponse
from linkboard.auth.deps import require_plan
from linkboard.auth.models import Identity
from linkboard.services.analyses import AnalysisService
from linkboard.services.forms import AnalysisFormData

router = APIRouter(
    prefix="/v1/analyses", tags=["analyses"], dependencies=[Depends(require_plan())]
)


@router.get("", response_model=list[AnalysisResponse])
async def list_analyses(
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> list[AnalysisResponse]:
    analyses = await AnalysisService(session=session).list(identity)
    return [AnalysisResponse.model_validate(a) for a in analyses]


@router.post("", response_model=AnalysisResponse, status_code=HTTP_201_CREATED)
async def create_analysis(
    body: AnalysisFormData,
    response: Response,
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> AnalysisResponse:
    mutation = await AnalysisService(session=session).create(identity, body)
    emit_invalidations(response, mutation)
    return AnalysisResponse.model_validate(mutation.result)


@router.get("/{analysis_id}", response_model=AnalysisResponse)
async def get_analysis(
    analysis_id: uuid.UUID,
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> AnalysisResponse:
    analysis = await AnalysisService(session=session).get(identity, analysis_id)
    if analysis is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Analysis not found")
    return AnalysisResponse.model_validate(analysis)


@router.put("/{analysis_id}", response_model=AnalysisResponse)
async def update_analysis(
    analysis_id: uuid.UUID,
    body: AnalysisFormData,
    response: Response,
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> AnalysisResponse:
    mutation = await AnalysisService(session=session).update(identity, analysis_id, body)
    emit_invalidations(response, mutation)
    return AnalysisResponse.model_validate(mutation.result)


@router.delete("/{analysis_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_analysis(
    analysis_id: uuid.UUID,
    response: Response,
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> None:
    mutation = await AnalysisService(session=session).delete(identity, analysis_id)
    emit_invalidations(response, mutation)
