"""Upload endpoints protected by the application-wide body limit."""

from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.schemas import NoteCreate, NoteResponse, UploadReceipt
from app.core.config import AVATAR_MAX_BYTES
from bodylimit.content_type import normalize_content_type
from bodylimit.monitor import read_limited_body

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post("", response_model=UploadReceipt)
async def upload_raw(request: Request):
    body = await request.body()
    return UploadReceipt(
        received=len(body),
        content_type=normalize_content_type(request.headers.get("content-type")),
    )


@router.post("/notes", response_model=NoteResponse, status_code=201)
async def create_note(body: NoteCreate):
    return NoteResponse(title=body.title, text=body.text, tags=body.tags, size=len(body.text))


@router.post("/avatar", response_model=UploadReceipt)
async def upload_avatar(request: Request):
    # Tighter than the application-wide cap; LimitExceeded maps to 413.
    body = await read_limited_body(request, AVATAR_MAX_BYTES)
    return UploadReceipt(
        received=len(body),
        content_type=normalize_content_type(request.headers.get("content-type")),
    )
