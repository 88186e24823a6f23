"""Global exception handlers — translate domain errors to HTTP responses.

Each error kind maps to a specific HTTP status code and the standard
``{"status": "error", "kind": "...", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from instance_finder.domain.exceptions import (
    ErrorKind,
    InstanceFinderError,
    RemoteError,
)
from instance_finder.interface.schemas import ErrorResponse

logger = logging.getLogger(__name__)

_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NO_TOKEN: 401,
    ErrorKind.NETWORK: 502,
    ErrorKind.REMOTE: 502,
    ErrorKind.SERIALIZATION: 502,
    ErrorKind.STORAGE: 500,
    ErrorKind.INVALID_PARAMS: 422,
}


def _error_json(
    status_code: int,
    kind: str,
    message: str,
    remote_status: int | None = None,
) -> JSONResponse:
    envelope = ErrorResponse(kind=kind, message=message, remote_status=remote_status)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(exclude_none=True))


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(InstanceFinderError)
    async def domain_handler(request: Request, exc: InstanceFinderError) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        remote_status = exc.status if isinstance(exc, RemoteError) else None
        return _error_json(
            _KIND_STATUS.get(exc.kind, 500), exc.kind.value, str(exc), remote_status
        )

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, ErrorKind.INVALID_PARAMS.value, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "internal", "An unexpected error occurred.")
