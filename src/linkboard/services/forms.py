"""
linkboard.services.forms

Form payloads accepted by the services (also used as HTTP request bodies).

Fields are deliberately loose: presence, blankness and length are judged by
`services.validation` so both entry points report the same errors.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ProfileFormData(BaseModel):
    name: str | None = None
    email: str | None = None


class AnalysisFormData(BaseModel):
    title: str | None = None
    description: str | None = None
    status: str | None = None
    data: dict[str, Any] | None = Field(default=None)
