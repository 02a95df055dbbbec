"""
linkboard.auth.plans

Subscription plan resolution.

Responsibilities:
- Derive the caller's plan from a `ProviderSession` through an ordered list of
  strategies; the first one that yields a definite answer wins.
- Offer small predicates over the resolved plan.

Resolution order:
1. capability check (`session.has`) for the pro key, then the free key
2. a `plan` claim, or `plan` inside the claims' public metadata (passed through verbatim)
3. the provider's user record: no user -> `unresolved`; otherwise its metadata plan, default `free`

Faults raised by the provider (capability check, user lookup) are not caught here.
"""

from __future__ import annotations

import enum
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from linkboard.auth.models import ProviderSession, UserRecord


class Plan(enum.StrEnum):
    free = "free"
    pro = "pro"
    unresolved = "unresolved"


# Claim-sourced plans are not validated against `Plan`, hence the `str`.
PlanValue = Plan | str
PlanStrategy = Callable[[ProviderSession], Awaitable[PlanValue | None]]


def capability_strategy(*, pro_key: str, free_key: str) -> PlanStrategy:
    async def _resolve(session: ProviderSession) -> PlanValue | None:
        if session.has is None:
            return None
        if session.has(pro_key):
            return Plan.pro
        if session.has(free_key):
            return Plan.free
        return None

    return _resolve


async def claims_strategy(session: ProviderSession) -> PlanValue | None:
    claims = session.claims or {}
    plan = claims.get("plan")
    if not plan:
        plan = _metadata_plan(claims.get("public_metadata") or claims.get("publicMetadata"))
    return plan or None


async def user_record_strategy(session: ProviderSession) -> PlanValue | None:
    user = await _load_user(session)
    if user is None:
        return Plan.unresolved
    return _metadata_plan(user.public_metadata) or Plan.free


async def _load_user(session: ProviderSession) -> UserRecord | None:
    if session.current_user is not None:
        return await session.current_user()
    if session.user_id:
        # No directory to ask; the caller is authenticated but has no recorded metadata.
        return UserRecord(id=session.user_id)
    return None


def _metadata_plan(metadata: Any) -> Any:
    if isinstance(metadata, Mapping):
        return metadata.get("plan")
    return None


class PlanResolver:
    def __init__(self, strategies: Sequence[PlanStrategy]) -> None:
        self._strategies = tuple(strategies)

    @classmethod
    def default(cls, *, pro_key: str = "pro_plan", free_key: str = "free_user") -> PlanResolver:
        return cls(
            [
                capability_strategy(pro_key=pro_key, free_key=free_key),
                claims_strategy,
                user_record_strategy,
            ]
        )

    async def resolve(self, session: ProviderSession) -> PlanValue:
        for strategy in self._strategies:
            plan = await strategy(session)
            if plan is not None:
                return plan
        return Plan.unresolved


async def resolve_plan(session: ProviderSession, resolver: PlanResolver | None = None) -> PlanValue:
    return await (resolver or PlanResolver.default()).resolve(session)


def is_on_pro_plan(plan: PlanValue) -> bool:
    return plan == Plan.pro


def is_on_free_plan(plan: PlanValue) -> bool:
    return plan == Plan.free


# --- Module Notes -----------------------------------------------------------
# Claims are checked before the user record: they travel with the token (fast, possibly
# stale) while the directory is authoritative but costs a round trip.
