"""
linkboard.auth.gate

Plan-based access gate for the dashboard feature.

Responsibilities:
- Allow a session through only when its resolved plan is `pro`.
- Treat any fault during plan resolution as a denial.
"""

from __future__ import annotations

from linkboard.auth.models import ProviderSession
from linkboard.auth.plans import Plan, PlanResolver
from linkboard.observability.logging import get_logger

log = get_logger(__name__)


class AccessGate:
    def __init__(self, resolver: PlanResolver, *, required: Plan = Plan.pro) -> None:
        self._resolver = resolver
        self._required = required

    async def authorize(self, session: ProviderSession) -> bool:
        try:
            plan = await self._resolver.resolve(session)
        except Exception as e:
            log.warning("plan_resolution_failed", user_id=session.user_id, error=str(e))
            return False
        allowed = plan == self._required
        if not allowed:
            log.info("access_denied", user_id=session.user_id, plan=str(plan))
        return allowed
