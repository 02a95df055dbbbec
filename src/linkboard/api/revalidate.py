from __future__ import annotations

from typing import Any

from fastapi import Response

from linkboard.services.invalidation import Mutation

REVALIDATE_HEADER = "X-Revalidate-Path"


def emit_invalidations(response: Response, mutation: Mutation[Any]) -> None:
    # Clients re-fetch the listed routes on their next render.
    if mutation.invalidates:
        response.headers[REVALIDATE_HEADER] = ",".join(sorted(mutation.invalidates))
