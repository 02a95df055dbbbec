from __future__ import annotations

import httpx
import pytest

from linkboard.auth.gate import AccessGate
from linkboard.auth.models import ProviderSession, UserRecord
from linkboard.auth.plans import (
    Plan,
    PlanResolver,
    is_on_free_plan,
    is_on_pro_plan,
    resolve_plan,
)
from linkboard.auth.provider import IdentityProviderClient
from linkboard.settings import Settings


def _user_loader(record: UserRecord | None):
    async def _load() -> UserRecord | None:
        return record

    return _load


@pytest.mark.asyncio
async def test_capability_pro_wins_over_conflicting_claims() -> None:
    session = ProviderSession(
        user_id="u1",
        claims={"plan": "free", "public_metadata": {"plan": "free"}},
        has=lambda key: key == "pro_plan",
    )
    assert await resolve_plan(session) == Plan.pro


@pytest.mark.asyncio
async def test_capability_free_checked_after_pro() -> None:
    session = ProviderSession(user_id="u1", has=lambda key: key == "free_user")
    assert await resolve_plan(session) == Plan.free


@pytest.mark.asyncio
async def test_capability_without_match_falls_through_to_claims() -> None:
    session = ProviderSession(user_id="u1", has=lambda key: False, claims={"plan": "pro"})
    assert await resolve_plan(session) == Plan.pro


@pytest.mark.asyncio
async def test_claim_plan_is_passed_through_verbatim() -> None:
    session = ProviderSession(user_id="u1", claims={"plan": "enterprise"})
    assert await resolve_plan(session) == "enterprise"


@pytest.mark.asyncio
async def test_nested_public_metadata_claim() -> None:
    session = ProviderSession(user_id="u1", claims={"public_metadata": {"plan": "pro"}})
    assert await resolve_plan(session) == Plan.pro

    camel = ProviderSession(user_id="u1", claims={"publicMetadata": {"plan": "pro"}})
    assert await resolve_plan(camel) == Plan.pro


@pytest.mark.asyncio
async def test_user_record_metadata_plan() -> None:
    session = ProviderSession(
        user_id="u1", current_user=_user_loader(UserRecord(id="u1", public_metadata={"plan": "pro"}))
    )
    assert await resolve_plan(session) == Plan.pro


@pytest.mark.asyncio
async def test_authenticated_user_without_plan_signal_defaults_to_free() -> None:
    session = ProviderSession(user_id="u1", current_user=_user_loader(UserRecord(id="u1")))
    assert await resolve_plan(session) == Plan.free

    # No directory at all: still an authenticated caller.
    assert await resolve_plan(ProviderSession(user_id="u1")) == Plan.free


@pytest.mark.asyncio
async def test_no_authenticated_caller_is_unresolved() -> None:
    assert await resolve_plan(ProviderSession.anonymous()) == Plan.unresolved
    gone = ProviderSession(user_id="u1", current_user=_user_loader(None))
    assert await resolve_plan(gone) == Plan.unresolved


@pytest.mark.asyncio
async def test_custom_capability_keys() -> None:
    resolver = PlanResolver.default(pro_key="gold", free_key="basic")
    session = ProviderSession(user_id="u1", has=lambda key: key == "gold")
    assert await resolver.resolve(session) == Plan.pro


@pytest.mark.asyncio
async def test_empty_strategy_list_is_unresolved() -> None:
    assert await PlanResolver([]).resolve(ProviderSession(user_id="u1")) == Plan.unresolved


@pytest.mark.asyncio
async def test_plan_predicates() -> None:
    pro = await resolve_plan(ProviderSession(user_id="u1", claims={"plan": "pro"}))
    free = await resolve_plan(ProviderSession(user_id="u2"))
    anonymous = await resolve_plan(ProviderSession.anonymous())
    assert is_on_pro_plan(pro)
    assert not is_on_free_plan(pro)
    assert is_on_free_plan(free)
    assert not is_on_pro_plan(anonymous)
    assert not is_on_free_plan(anonymous)
    assert not is_on_pro_plan("enterprise")


@pytest.mark.asyncio
async def test_provider_fault_propagates_from_resolver() -> None:
    async def _boom() -> UserRecord | None:
        raise RuntimeError("directory down")

    session = ProviderSession(user_id="u1", current_user=_boom)
    with pytest.raises(RuntimeError):
        await resolve_plan(session)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("session", "expected"),
    [
        (ProviderSession(user_id="u1", claims={"plan": "pro"}), True),
        (ProviderSession(user_id="u1", claims={"plan": "free"}), False),
        (ProviderSession(user_id="u1"), False),
        (ProviderSession.anonymous(), False),
    ],
)
async def test_gate_allows_only_pro(session: ProviderSession, expected: bool) -> None:
    assert await AccessGate(PlanResolver.default()).authorize(session) is expected


@pytest.mark.asyncio
async def test_gate_denies_on_provider_fault() -> None:
    def _has(_: str) -> bool:
        raise ConnectionError("provider unreachable")

    session = ProviderSession(user_id="u1", has=_has)
    assert await AccessGate(PlanResolver.default()).authorize(session) is False


@pytest.mark.asyncio
async def test_directory_client_feeds_resolver() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Authorization"] == "Bearer sk_test"
        if request.url.path == "/users/u1":
            return httpx.Response(200, json={"id": "u1", "public_metadata": {"plan": "pro"}})
        if request.url.path == "/users/broken":
            return httpx.Response(500, json={"error": "boom"})
        return httpx.Response(404, json={"error": "not found"})

    settings = Settings(env="test", identity_api_base_url="http://idp", identity_api_key="sk_test")
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://idp"
    ) as http:
        directory = IdentityProviderClient(settings=settings, http=http)

        u1 = ProviderSession(user_id="u1", current_user=lambda: directory.get_user("u1"))
        assert await resolve_plan(u1) == Plan.pro

        missing = ProviderSession(user_id="ghost", current_user=lambda: directory.get_user("ghost"))
        assert await resolve_plan(missing) == Plan.unresolved

        broken = ProviderSession(user_id="broken", current_user=lambda: directory.get_user("broken"))
        with pytest.raises(httpx.HTTPStatusError):
            await resolve_plan(broken)
        assert await AccessGate(PlanResolver.default()).authorize(broken) is False
