"""
linkboard.auth.identity

Identity context: "who is the caller" derived from the provider session.

Responsibilities:
- Resolve an `Identity` from a `ProviderSession` once, at the request boundary.
- Enforce the mandatory identity precondition of every service operation.
"""

from __future__ import annotations

from linkboard.auth.models import Identity, ProviderSession
from linkboard.errors import Unauthorized


def current_identity(session: ProviderSession) -> Identity | None:
    if not session.user_id:
        return None
    return Identity(user_id=session.user_id)


def require_identity(identity: Identity | None) -> Identity:
    if identity is None or not identity.user_id:
        raise Unauthorized()
    return identity
