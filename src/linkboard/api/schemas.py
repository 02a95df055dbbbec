"""
linkboard.api.schemas

Response models rendered from ORM rows.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    name: str
    email: str | None
    created_at: datetime
    updated_at: datetime


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    title: str
    description: str | None
    status: str
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class DashboardResponse(BaseModel):
    profile: ProfileResponse | None = None
    analyses: list[AnalysisResponse] = Field(default_factory=list)
    database_setup_required: bool = False


class PlanResponse(BaseModel):
    plan: str
    is_pro: bool
    is_free: bool
