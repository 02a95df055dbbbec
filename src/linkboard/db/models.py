"""
linkboard.db.models

Persistence schema.

Responsibilities:
- Profile: at most one per owning identity (unique `user_id`).
- Analysis: many per owning identity, listed newest-first.

Both kinds are owned by the identity directly; an Analysis does not reference a Profile.
"""

from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, String, Text, TypeDecorator, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from linkboard.db.base import Base

NAME_MAX = 100
EMAIL_MAX = 100
TITLE_MAX = 100
DESCRIPTION_MAX = 500


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


class UTCDateTime(TypeDecorator[datetime]):
    """
    Timestamps are written in UTC and always read back tz-aware, including on
    SQLite, which drops the offset.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            return value.astimezone(UTC)
        return value

    def process_result_value(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class AnalysisStatus(enum.StrEnum):
    draft = "draft"
    in_progress = "in-progress"
    completed = "completed"


class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    # Unique: concurrent first-time creates for one identity must not both succeed.
    user_id: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)

    name: Mapped[str] = mapped_column(String(NAME_MAX), nullable=False)
    email: Mapped[str | None] = mapped_column(String(EMAIL_MAX), nullable=True)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow
    )


class Analysis(Base):
    __tablename__ = "analyses"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[str] = mapped_column(String(256), nullable=False, index=True)

    title: Mapped[str] = mapped_column(String(TITLE_MAX), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Stored as plain strings so the enum can grow without a DB enum migration.
    status: Mapped[str] = mapped_column(String(32), nullable=False, default=AnalysisStatus.draft.value)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (Index("ix_analyses_user_created", "user_id", "created_at"),)


# --- Module Notes -----------------------------------------------------------
# Column lengths double as the form limits enforced in `services.validation`.
