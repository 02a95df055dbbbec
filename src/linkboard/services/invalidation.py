"""
linkboard.services.invalidation

Explicit "this mutation invalidates view X" signal returned by every write.

The calling layer decides what to do with it (the HTTP layer emits an
`X-Revalidate-Path` header); services never reach into presentation code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

DASHBOARD_ROUTE = "/dashboard"

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Mutation(Generic[T]):
    result: T
    invalidates: frozenset[str] = field(default_factory=lambda: frozenset({DASHBOARD_ROUTE}))
