from __future__ import annotations

import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from linkboard.auth.models import Identity
from linkboard.db.repositories.analyses import AnalysisRepo
from linkboard.db.repositories.profiles import ProfileRepo
from linkboard.db.session import create_engine, create_sessionmaker
from linkboard.errors import StoreFault, Unauthorized, ValidationError
from linkboard.services.analyses import AnalysisService
from linkboard.services.dashboard import load_dashboard
from linkboard.services.forms import AnalysisFormData, ProfileFormData
from linkboard.services.invalidation import DASHBOARD_ROUTE
from linkboard.services.profiles import ProfileService
from linkboard.settings import Settings

U1 = Identity("u1")
U2 = Identity("u2")


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["", "   "])
async def test_blank_title_makes_no_store_calls(title: str) -> None:
    repo = AsyncMock(spec=AnalysisRepo)
    session = AsyncMock(spec=AsyncSession)
    svc = AnalysisService(session=session, repo=repo)

    with pytest.raises(ValidationError):
        await svc.create(U1, AnalysisFormData(title=title))
    with pytest.raises(ValidationError):
        await svc.update(U1, uuid.uuid4(), AnalysisFormData(title=title))

    assert repo.mock_calls == []
    session.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_blank_profile_name_makes_no_store_calls() -> None:
    repo = AsyncMock(spec=ProfileRepo)
    session = AsyncMock(spec=AsyncSession)
    svc = ProfileService(session=session, repo=repo)

    with pytest.raises(ValidationError) as exc:
        await svc.create(U1, ProfileFormData(name="  ", email="a@example.com"))
    assert exc.value.field == "name"
    assert repo.mock_calls == []


@pytest.mark.asyncio
async def test_missing_identity_is_unauthorized_before_store() -> None:
    repo = AsyncMock(spec=AnalysisRepo)
    svc = AnalysisService(session=AsyncMock(spec=AsyncSession), repo=repo)

    with pytest.raises(Unauthorized):
        await svc.list(None)
    with pytest.raises(Unauthorized):
        await svc.create(Identity(""), AnalysisFormData(title="Valid"))
    assert repo.mock_calls == []


@pytest.mark.asyncio
async def test_q1_review_lifecycle(session: AsyncSession) -> None:
    svc = AnalysisService(session=session)

    created = await svc.create(U1, AnalysisFormData(title="Q1 Review", status="draft"))
    a = created.result
    assert created.invalidates == frozenset({DASHBOARD_ROUTE})
    assert a.title == "Q1 Review"
    assert a.status == "draft"
    assert a.description is None
    assert a.data == {}
    assert a.id is not None
    assert a.created_at is not None and a.updated_at is not None
    analysis_id, created_at = a.id, a.created_at

    updated = await svc.update(
        U1, analysis_id, AnalysisFormData(title="Q1 Review Final", status="completed")
    )
    assert updated.result.id == analysis_id
    assert updated.result.created_at == created_at
    assert updated.result.title == "Q1 Review Final"
    assert updated.result.status == "completed"
    assert updated.invalidates == frozenset({DASHBOARD_ROUTE})

    listed = await svc.list(U1)
    assert len(listed) == 1
    assert listed[0].id == analysis_id
    assert listed[0].title == "Q1 Review Final"
    assert listed[0].status == "completed"


@pytest.mark.asyncio
async def test_create_then_get_in_a_fresh_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as s:
        created = (
            await AnalysisService(session=s).create(
                U1,
                AnalysisFormData(
                    title="Churn", description="Monthly churn", status="in-progress", data={"k": 1}
                ),
            )
        ).result

    async with session_factory() as s:
        fetched = await AnalysisService(session=s).get(U1, created.id)
        assert fetched is not None
        for attr in ("id", "user_id", "title", "description", "status", "data"):
            assert getattr(fetched, attr) == getattr(created, attr)
        assert await AnalysisService(session=s).get(U2, created.id) is None


@pytest.mark.asyncio
async def test_delete_then_get_returns_none(session: AsyncSession) -> None:
    svc = AnalysisService(session=session)
    analysis_id = (await svc.create(U1, AnalysisFormData(title="Temp"))).result.id

    deleted = await svc.delete(U1, analysis_id)
    assert deleted.result is None
    assert deleted.invalidates == frozenset({DASHBOARD_ROUTE})
    assert await svc.get(U1, analysis_id) is None


@pytest.mark.asyncio
async def test_other_identity_cannot_update_or_delete(session: AsyncSession) -> None:
    svc = AnalysisService(session=session)
    analysis_id = (await svc.create(U1, AnalysisFormData(title="Private"))).result.id

    with pytest.raises(StoreFault):
        await svc.update(U2, analysis_id, AnalysisFormData(title="Mine now"))
    await svc.delete(U2, analysis_id)

    still_there = await svc.get(U1, analysis_id)
    assert still_there is not None
    assert still_there.title == "Private"


@pytest.mark.asyncio
async def test_profile_lifecycle(session: AsyncSession) -> None:
    svc = ProfileService(session=session)
    assert await svc.get(U1) is None

    created = (await svc.create(U1, ProfileFormData(name="Ada", email=""))).result
    assert created.email is None
    assert created.user_id == "u1"

    updated = (await svc.update(U1, ProfileFormData(name="Ada L.", email="ada@example.com"))).result
    assert updated.id == created.id
    assert updated.email == "ada@example.com"

    with pytest.raises(StoreFault):
        await svc.create(U1, ProfileFormData(name="Second"))

    await svc.delete(U1)
    assert await svc.get(U1) is None


@pytest.mark.asyncio
async def test_profile_update_without_profile_propagates_fault(session: AsyncSession) -> None:
    with pytest.raises(StoreFault):
        await ProfileService(session=session).update(U2, ProfileFormData(name="Nobody"))


@pytest.mark.asyncio
async def test_dashboard_loads_analyses_only_with_profile(session: AsyncSession) -> None:
    await AnalysisService(session=session).create(U1, AnalysisFormData(title="Orphan"))

    state = await load_dashboard(session, U1)
    assert state.profile is None
    assert state.analyses == []
    assert state.database_setup_required is False

    await ProfileService(session=session).create(U1, ProfileFormData(name="Ada"))
    state = await load_dashboard(session, U1)
    assert state.profile is not None
    assert [a.title for a in state.analyses] == ["Orphan"]


@pytest.mark.asyncio
async def test_dashboard_reports_store_fault_as_setup_required(settings: Settings) -> None:
    engine = create_engine(settings)  # schema never created
    try:
        async with create_sessionmaker(engine)() as s:
            state = await load_dashboard(s, U1)
    finally:
        await engine.dispose()

    assert state.database_setup_required is True
    assert state.profile is None
