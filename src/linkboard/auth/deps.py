"""
linkboard.auth.deps

FastAPI dependency functions for authentication and plan gating.

Responsibilities:
- Convert an (optional) bearer token into a `ProviderSession`, once per request.
- Derive the caller `Identity` from that session.
- Enforce the plan gate via a reusable dependency factory.
"""

from __future__ import annotations

from functools import partial
from typing import Any

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from linkboard.auth.gate import AccessGate
from linkboard.auth.identity import current_identity
from linkboard.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from linkboard.auth.models import CapabilityCheck, Identity, ProviderSession
from linkboard.auth.plans import Plan, PlanResolver
from linkboard.auth.provider import IdentityProviderClient
from linkboard.settings import Settings, get_settings

_bearer = HTTPBearer(auto_error=False)


def _capability_check(claims: dict[str, Any]) -> CapabilityCheck | None:
    # Only a `pla` claim shaped as a comma string or a list enables capability checks.
    raw = claims.get("pla")
    if isinstance(raw, str):
        granted = frozenset(raw.split(","))
    elif isinstance(raw, (list, tuple)):
        granted = frozenset(str(c) for c in raw)
    else:
        return None
    return lambda key: key in granted


def get_provider_session(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> ProviderSession:
    # No token is not an error here: the plan resolver reports it as `unresolved`.
    if creds is None or not creds.credentials:
        return ProviderSession.anonymous()

    try:
        payload = decode_and_validate(cfg=JwtConfig.from_settings(settings), token=creds.credentials)
    except JwtValidationError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}") from e

    subject = str(payload.get("sub", ""))
    if not subject:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token subject")

    directory: IdentityProviderClient | None = getattr(request.app.state, "identity_provider", None)
    return ProviderSession(
        user_id=subject,
        claims=payload,
        has=_capability_check(payload),
        current_user=partial(directory.get_user, subject) if directory is not None else None,
    )


def get_identity(session: ProviderSession = Depends(get_provider_session)) -> Identity | None:
    return current_identity(session)


def plan_resolver(settings: Settings = Depends(get_settings)) -> PlanResolver:
    return PlanResolver.default(
        pro_key=settings.plan_capability_pro,
        free_key=settings.plan_capability_free,
    )


def require_plan(required: Plan = Plan.pro):
    async def _dep(
        session: ProviderSession = Depends(get_provider_session),
        resolver: PlanResolver = Depends(plan_resolver),
    ) -> ProviderSession:
        if not await AccessGate(resolver, required=required).authorize(session):
            raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Upgrade required")
        return session

    return _dep


# --- Module Notes -----------------------------------------------------------
# Routers declare `dependencies=[Depends(require_plan())]`, so a denied caller never
# reaches a handler and no DB statement is issued.
