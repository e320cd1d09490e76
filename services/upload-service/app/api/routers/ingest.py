"""
Event ingestion endpoints.

Served by a separate sub-application with its own, stricter body limit:
streamed bodies are byte-counted, but only for the media types listed in
``INGEST_ALLOW_LIST``.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.schemas import IngestAck

router = APIRouter(prefix="/events", tags=["ingest"])


@router.post("", response_model=IngestAck, status_code=202)
async def ingest_events(request: Request):
    body = await request.body()
    lines = [line for line in body.splitlines() if line.strip()]
    return IngestAck(
        events=len(lines),
        received=len(body),
        metadata={"content_type": request.headers.get("content-type", "")},
    )
