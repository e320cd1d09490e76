"""Pydantic schemas for upload-service request / response bodies."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class UploadReceipt(BaseModel):
    received: int
    content_type: str


class NoteCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    text: str = ""
    tags: list[str] = []


class NoteResponse(BaseModel):
    title: str
    text: str
    tags: list[str]
    size: int


class IngestAck(BaseModel):
    events: int
    received: int
    metadata: dict[str, Any] = {}
