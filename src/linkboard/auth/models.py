"""
linkboard.auth.models

Auth domain models.

Responsibilities:
- `Identity`: the explicit caller reference passed into every service call.
- `UserRecord`: the provider-side user as seen through its directory.
- `ProviderSession`: what the provider exposes for one request (id, verified claims,
  optional capability check, optional current-user accessor).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Identity:
    """
    Authenticated caller identity. Opaque; used only as the ownership key on rows.
    """

    user_id: str


@dataclass(frozen=True, slots=True)
class UserRecord:
    id: str
    public_metadata: Mapping[str, Any] = field(default_factory=dict)


CapabilityCheck = Callable[[str], bool]
CurrentUserLoader = Callable[[], Awaitable[UserRecord | None]]


@dataclass(frozen=True, slots=True)
class ProviderSession:
    """
    One request's view of the identity provider.

    `has` and `current_user` are optional: not every session shape offers them,
    and the plan resolver falls through to the next source when they are absent.
    """

    user_id: str | None
    claims: Mapping[str, Any] = field(default_factory=dict)
    has: CapabilityCheck | None = None
    current_user: CurrentUserLoader | None = None

    @classmethod
    def anonymous(cls) -> ProviderSession:
        return cls(user_id=None)


# --- Module Notes -----------------------------------------------------------
# `ProviderSession` is built once per request in `auth.deps.get_provider_session`;
# services never see it, they receive an `Identity`.
