"""
linkboard.auth.provider

HTTP client boundary for the identity provider's user directory.

Responsibilities:
- Fetch a user's record (public metadata included) with the provider API key.
- Map "no such user" to `None`; every other failure propagates.
"""

from __future__ import annotations

from typing import Any

import httpx

from linkboard.auth.models import UserRecord
from linkboard.settings import Settings


class IdentityProviderClient:
    """
    The provider owns users; this service only reads their public metadata.
    """

    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    def _authz(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._settings.identity_api_key}"}

    async def get_user(self, user_id: str) -> UserRecord | None:
        r = await self._http.get(f"/users/{user_id}", headers=self._authz())
        if r.status_code == 404:
            return None
        r.raise_for_status()
        body: dict[str, Any] = r.json()
        return UserRecord(
            id=str(body.get("id", user_id)),
            public_metadata=dict(body.get("public_metadata") or {}),
        )


def build_provider_http(settings: Settings) -> httpx.AsyncClient | None:
    if not settings.identity_api_base_url:
        return None
    return httpx.AsyncClient(
        base_url=settings.identity_api_base_url.rstrip("/"),
        timeout=settings.identity_api_timeout_s,
    )


# --- Module Notes -----------------------------------------------------------
# One AsyncClient is created per process in `api.app` and shared across requests.
