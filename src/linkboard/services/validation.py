"""
linkboard.services.validation

One field-validation policy for every form in the service.

Responsibilities:
- Required text must be non-blank after trimming whitespace.
- Optional text that is absent or blank becomes `None`.
- No text may exceed its maximum length.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from linkboard.db.models import (
    DESCRIPTION_MAX,
    EMAIL_MAX,
    NAME_MAX,
    TITLE_MAX,
    AnalysisStatus,
)
from linkboard.errors import ValidationError


@dataclass(frozen=True, slots=True)
class FieldRule:
    name: str
    required: bool
    max_length: int

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").capitalize()


PROFILE_NAME = FieldRule("name", required=True, max_length=NAME_MAX)
PROFILE_EMAIL = FieldRule("email", required=False, max_length=EMAIL_MAX)
ANALYSIS_TITLE = FieldRule("title", required=True, max_length=TITLE_MAX)
ANALYSIS_DESCRIPTION = FieldRule("description", required=False, max_length=DESCRIPTION_MAX)


def validate_field(value: str | None, rule: FieldRule) -> str | None:
    if value is None or not value.strip():
        if rule.required:
            raise ValidationError(rule.name, f"{rule.label} is required")
        return None
    if len(value) > rule.max_length:
        raise ValidationError(
            rule.name, f"{rule.label} must be at most {rule.max_length} characters"
        )
    return value


def validate_choice(value: str | None, *, field: str, choices: Iterable[str], default: str) -> str:
    if not value:
        return default
    allowed = list(choices)
    if value not in allowed:
        raise ValidationError(field, f"{field.capitalize()} must be one of: {', '.join(allowed)}")
    return value


def validate_status(value: str | None) -> str:
    return validate_choice(
        value,
        field="status",
        choices=(s.value for s in AnalysisStatus),
        default=AnalysisStatus.draft.value,
    )
