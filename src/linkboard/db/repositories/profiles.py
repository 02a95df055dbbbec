from __future__ import annotations

from linkboard.auth.models import Identity
from linkboard.db.models import Profile
from linkboard.db.repositories.owned import OwnedRepo


class ProfileRepo(OwnedRepo[Profile]):
    model = Profile

    async def get(self, owner: Identity) -> Profile | None:
        return await self._one(owner)

    async def insert(self, owner: Identity, *, name: str, email: str | None) -> Profile:
        return await self._insert(owner, {"name": name, "email": email})

    async def update(self, owner: Identity, *, name: str, email: str | None) -> Profile:
        return await self._update(owner, {"name": name, "email": email})

    async def delete(self, owner: Identity) -> int:
        return await self._delete(owner)
