"""
linkboard.api.errors

Map domain errors to HTTP responses.

- Unauthorized    -> 401
- ValidationError -> 422 with the offending field (shown inline by clients)
- StoreFault      -> 500 with the store's raw message (shown as a generic failure banner)
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from linkboard.errors import StoreFault, Unauthorized, ValidationError
from linkboard.observability.logging import get_logger

log = get_logger(__name__)


async def _unauthorized(_: Request, exc: Unauthorized) -> JSONResponse:
    return JSONResponse(status_code=HTTP_401_UNAUTHORIZED, content={"detail": exc.message})


async def _validation(_: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field": exc.field},
    )


async def _store_fault(_: Request, exc: StoreFault) -> JSONResponse:
    log.error("store_fault", error=exc.message)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Store error: {exc.message}"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(Unauthorized, _unauthorized)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, _validation)  # type: ignore[arg-type]
    app.add_exception_handler(StoreFault, _store_fault)  # type: ignore[arg-type]
