"""Unit tests – structured logging of body-limit decisions."""

import json
import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bodylimit.logging import setup_logging
from bodylimit.middleware import CorrelationMiddleware, install_body_limit


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    library_level = logging.getLogger("bodylimit").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("bodylimit").setLevel(library_level)


def _protected_app() -> FastAPI:
    app = FastAPI()
    install_body_limit(app, max_size=8)
    app.add_middleware(CorrelationMiddleware)

    @app.post("/upload")
    async def upload():
        return {"ok": True}

    return app


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.startswith("{")]


def test_json_rejection_record_carries_correlation_id(capsys, restore_logging):
    setup_logging("upload-service", "INFO", "json")
    client = TestClient(_protected_app())

    r = client.post("/upload", content=b"x" * 20, headers={"X-Correlation-Id": "cid-json-1"})
    assert r.status_code == 413

    records = _json_lines(capsys.readouterr().out)
    [rejection] = [rec for rec in records if rec["message"] == "Rejected request by declared length"]
    assert rejection["level"] == "INFO"
    assert rejection["name"] == "bodylimit.middleware.body_limit"
    assert rejection["correlation_id"] == "cid-json-1"
    assert rejection["service"] == "upload-service"
    assert rejection["path"] == "/upload"
    assert rejection["limit"] == 8
    assert rejection["declared"] == "20"


def test_records_outside_requests_have_empty_correlation_id(capsys, restore_logging):
    setup_logging("upload-service", "INFO", "json")

    [startup] = _json_lines(capsys.readouterr().out)
    assert startup["message"] == "Logging initialised"
    assert startup["correlation_id"] == ""
    assert startup["log_format"] == "json"


def test_text_format(capsys, restore_logging):
    setup_logging("upload-service", "INFO", "text")
    logging.getLogger("bodylimit.test").info("hello")

    out = capsys.readouterr().out
    assert "[INFO] upload-service bodylimit.test () hello" in out


def test_library_level_silences_rejections(capsys, restore_logging):
    setup_logging("upload-service", "INFO", "json", library_level="warning")
    client = TestClient(_protected_app())

    assert client.post("/upload", content=b"x" * 20).status_code == 413

    messages = [rec["message"] for rec in _json_lines(capsys.readouterr().out)]
    assert "Rejected request by declared length" not in messages
