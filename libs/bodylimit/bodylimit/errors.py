"""
Body-limit error types and FastAPI exception handlers.

Services register these handlers in their ``main.py`` so that size
violations raised inside route code get the same response shape the
middleware produces:

    { "error": "<type>", "detail": "<message>" }
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ── Base errors ────────────────────────────────────────────────────────

class BodyLimitError(Exception):
    """Base class for every error raised by ``bodylimit``."""

    def __init__(self, detail: str = "Request body rejected"):
        super().__init__(detail)
        self.detail = detail


class ConfigurationInvalid(BodyLimitError):
    """The configured cap cannot work on this host. Fatal at start-up."""


class LengthRequired(BodyLimitError):
    """Declared length missing while strict mode is on (411)."""

    def __init__(self, detail: str = "Content-Length header is required"):
        super().__init__(detail)


class LimitExceeded(BodyLimitError):
    """Declared or observed body size crossed the cap (413)."""

    def __init__(self, max_bytes: int, received: int | None = None):
        self.max_bytes = max_bytes
        self.received = received
        super().__init__(f"Request body exceeds {max_bytes} bytes")


# ── Handlers ───────────────────────────────────────────────────────────

def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(LengthRequired)
    async def _length_required(request: Request, exc: LengthRequired) -> JSONResponse:
        return JSONResponse(status_code=411, content={"error": "length_required", "detail": exc.detail})

    @app.exception_handler(LimitExceeded)
    async def _limit_exceeded(request: Request, exc: LimitExceeded) -> JSONResponse:
        return JSONResponse(status_code=413, content={"error": "payload_too_large", "detail": exc.detail})

    @app.exception_handler(ValueError)
    async def _value(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"error": "validation_error", "detail": str(exc)})

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url)
        return JSONResponse(
            status_code=500,
            content={"error": "internal_server_error", "detail": "An unexpected error occurred"},
        )
