"""Upload-service – FastAPI application entry-point."""

from __future__ import annotations

from fastapi import FastAPI

from app.api.routers.health import router as health_router
from app.api.routers.ingest import router as ingest_router
from app.api.routers.uploads import router as uploads_router
from app.core.config import BODY_LIMIT_OPTIONS, INGEST_OPTIONS
from app.core.logging import init_logging
from bodylimit.errors import register_error_handlers
from bodylimit.middleware import CorrelationMiddleware, install_body_limit

init_logging()


def _build_ingest_app() -> FastAPI:
    ingest = FastAPI(title="Upload Service – ingest")
    install_body_limit(ingest, INGEST_OPTIONS)
    register_error_handlers(ingest)
    ingest.include_router(ingest_router)
    return ingest


app = FastAPI(
    title="Upload Service",
    description="Accept uploads behind request body-size enforcement",
    version="0.1.0",
)

install_body_limit(app, BODY_LIMIT_OPTIONS)
app.add_middleware(CorrelationMiddleware)

register_error_handlers(app)

app.include_router(health_router)
app.include_router(uploads_router)
app.mount("/ingest", _build_ingest_app())
