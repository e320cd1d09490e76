"""Test fixtures for upload-service."""

import os

import pytest

os.environ["LOG_FORMAT"] = "text"
os.environ["BODY_LIMIT_MAX_SIZE"] = "1k"
os.environ["BODY_LIMIT_DEEP_INSPECT"] = "true"
os.environ["BODY_LIMIT_BLOCK_LIST"] = "application/octet-stream"
os.environ["INGEST_MAX_SIZE"] = "64"
os.environ["INGEST_ALLOW_LIST"] = "application/json,application/x-ndjson"
os.environ["AVATAR_MAX_SIZE"] = "32"

from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
