"""
linkboard.services.dashboard

Read-side composition for the dashboard view.

Responsibilities:
- Load the caller's profile and, only when one exists, their analyses.
- Report a store failure as "database setup required" instead of failing the view.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.auth.models import Identity
from linkboard.db.models import Analysis, Profile
from linkboard.errors import StoreFault
from linkboard.observability.logging import get_logger
from linkboard.services.analyses import AnalysisService
from linkboard.services.profiles import ProfileService

log = get_logger(__name__)


@dataclass(slots=True)
class DashboardState:
    profile: Profile | None = None
    analyses: list[Analysis] = field(default_factory=list)
    database_setup_required: bool = False


async def load_dashboard(session: AsyncSession, identity: Identity | None) -> DashboardState:
    state = DashboardState()
    try:
        state.profile = await ProfileService(session=session).get(identity)
        if state.profile is not None:
            state.analyses = await AnalysisService(session=session).list(identity)
    except StoreFault as e:
        # Typically the tables do not exist yet; the client shows setup instructions.
        log.error("dashboard_store_fault", error=e.message)
        return DashboardState(database_setup_required=True)
    return state
