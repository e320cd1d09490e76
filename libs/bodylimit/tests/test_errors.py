"""Unit tests – error taxonomy and FastAPI handlers."""

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from bodylimit.errors import BodyLimitError, ConfigurationInvalid, LengthRequired, LimitExceeded, register_error_handlers
from bodylimit.monitor import read_limited_body


def _app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/strict")
    async def strict(request: Request):
        if "content-length" not in request.headers:
            raise LengthRequired()
        return {"ok": True}

    @app.post("/capped")
    async def capped(request: Request):
        body = await read_limited_body(request, 8)
        return {"received": len(body)}

    @app.post("/invalid")
    async def invalid():
        raise ValueError("max_size must be positive")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("unexpected")

    return app


def test_taxonomy():
    assert issubclass(ConfigurationInvalid, BodyLimitError)
    assert issubclass(LengthRequired, BodyLimitError)
    assert issubclass(LimitExceeded, BodyLimitError)
    exc = LimitExceeded(10, 11)
    assert (exc.max_bytes, exc.received) == (10, 11)
    assert exc.detail == "Request body exceeds 10 bytes"


def test_length_required_handler():
    client = TestClient(_app())
    r = client.post("/strict", content=iter([b"abc"]))
    assert r.status_code == 411
    assert r.json() == {"error": "length_required", "detail": "Content-Length header is required"}


def test_limit_exceeded_handler():
    client = TestClient(_app())
    assert client.post("/capped", content=b"12345678").json() == {"received": 8}

    r = client.post("/capped", content=b"123456789")
    assert r.status_code == 413
    assert r.json() == {"error": "payload_too_large", "detail": "Request body exceeds 8 bytes"}


def test_value_error_handler():
    r = TestClient(_app()).post("/invalid")
    assert r.status_code == 422
    assert r.json()["error"] == "validation_error"


def test_unhandled_exception_handler():
    r = TestClient(_app(), raise_server_exceptions=False).get("/boom")
    assert r.status_code == 500
    assert r.json()["error"] == "internal_server_error"
