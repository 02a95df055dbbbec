from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.api.deps import caller_identity, owned_db_session
from linkboard.api.schemas import AnalysisResponse, DashboardResponse, ProfileResponse
from linkboard.auth.deps import require_plan
from linkboard.auth.models import Identity
from linkboard.services.dashboard import load_dashboard

router = APIRouter(prefix="/v1/dashboard", tags=["dashboard"], dependencies=[Depends(require_plan())])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    identity: Identity | None = Depends(caller_identity),
    session: AsyncSession = Depends(owned_db_session),
) -> DashboardResponse:
    state = await load_dashboard(session, identity)
    return DashboardResponse(
        profile=ProfileResponse.model_validate(state.profile) if state.profile else None,
        analyses=[AnalysisResponse.model_validate(a) for a in state.analyses],
        database_setup_required=state.database_setup_required,
    )
