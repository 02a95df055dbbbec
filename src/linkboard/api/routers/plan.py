from __future__ import annotations

from fastapi import APIRouter, Depends

from linkboard.api.schemas import PlanResponse
from linkboard.auth.deps import get_provider_session, plan_resolver
from linkboard.auth.models import ProviderSession
from linkboard.auth.plans import PlanResolver, is_on_free_plan, is_on_pro_plan

router = APIRouter(prefix="/v1/plan", tags=["plan"])


@router.get("", response_model=PlanResponse)
async def get_plan(
    session: ProviderSession = Depends(get_provider_session),
    resolver: PlanResolver = Depends(plan_resolver),
) -> PlanResponse:
    # Ungated: clients use this to decide between the dashboard and the upgrade prompt.
    plan = await resolver.resolve(session)
    return PlanResponse(plan=str(plan), is_pro=is_on_pro_plan(plan), is_free=is_on_free_plan(plan))
