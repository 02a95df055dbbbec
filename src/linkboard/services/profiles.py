"""
linkboard.services.profiles

Profile actions: one profile per identity.

Responsibilities:
- get / create / update / delete the caller's profile.
- Validate the form before touching the store.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.auth.identity import require_identity
from linkboard.auth.models import Identity
from linkboard.db.models import Profile
from linkboard.db.repositories.profiles import ProfileRepo
from linkboard.observability.logging import get_logger
from linkboard.services.forms import ProfileFormData
from linkboard.services.invalidation import Mutation
from linkboard.services.unit_of_work import write_scope
from linkboard.services.validation import PROFILE_EMAIL, PROFILE_NAME, validate_field

log = get_logger(__name__)


class ProfileService:
    def __init__(self, *, session: AsyncSession, repo: ProfileRepo | None = None) -> None:
        self._session = session
        self._profiles = repo or ProfileRepo(session)

    async def get(self, identity: Identity | None) -> Profile | None:
        owner = require_identity(identity)
        return await self._profiles.get(owner)

    async def create(self, identity: Identity | None, form: ProfileFormData) -> Mutation[Profile]:
        owner = require_identity(identity)
        name = validate_field(form.name, PROFILE_NAME)
        email = validate_field(form.email, PROFILE_EMAIL)

        async with write_scope(self._session):
            profile = await self._profiles.insert(owner, name=name, email=email)
        log.info("profile_created", user_id=owner.user_id, profile_id=str(profile.id))
        return Mutation(profile)

    async def update(self, identity: Identity | None, form: ProfileFormData) -> Mutation[Profile]:
        owner = require_identity(identity)
        name = validate_field(form.name, PROFILE_NAME)
        email = validate_field(form.email, PROFILE_EMAIL)

        async with write_scope(self._session):
            profile = await self._profiles.update(owner, name=name, email=email)
        log.info("profile_updated", user_id=owner.user_id, profile_id=str(profile.id))
        return Mutation(profile)

    async def delete(self, identity: Identity | None) -> Mutation[None]:
        owner = require_identity(identity)
        async with write_scope(self._session):
            deleted = await self._profiles.delete(owner)
        log.info("profile_deleted", user_id=owner.user_id, rows=deleted)
        return Mutation(None)


# --- Module Notes -----------------------------------------------------------
# Deleting a profile leaves the identity's analyses in place; both are owned by the identity.
