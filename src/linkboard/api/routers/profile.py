"""
linkboard.api.routers.profile

The caller's single profile. Gated behind the pro plan.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from linkboard.api.deps import caller_identity, owned_db_session
from linkboard.api.revalidate import emit_invalidations
from linkboard.api.schemas import ProfileResponse
from linkboard.auth.deps import require_plan
from linkboard.auth.models import Identity
from linkboard.services.forms import ProfileFormData
from linkboard.services.profiles import ProfileService

router = APIRouter(prefix="/v1/profile", tags=["profile"], dependencies=[Depends(require_plan())])


@router.get("", response_model=ProfileResponse | None)
async def get_profile(
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> ProfileResponse | None:
    profile = await ProfileService(session=session).get(identity)
    return ProfileResponse.model_validate(profile) if profile is not None else None


@router.post("", response_model=ProfileResponse, status_code=HTTP_201_CREATED)
async def create_profile(
    body: ProfileFormData,
    response: Response,
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> ProfileResponse:
    mutation = await ProfileService(session=session).create(identity, body)
    emit_invalidations(response, mutation)
    return ProfileResponse.model_validate(mutation.result)


@router.put("", response_model=ProfileResponse)
async def update_profile(
    body: ProfileFormData,
    response: Response,
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> ProfileResponse:
    mutation = await ProfileService(session=session).update(identity, body)
    emit_invalidations(response, mutation)
    return ProfileResponse.model_validate(mutation.result)


@router.delete("", status_code=HTTP_204_NO_CONTENT)
async def delete_profile(
    response: Response,
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> None:
    mutation = await ProfileService(session=session).delete(identity)
    emit_invalidations(response, mutation)
