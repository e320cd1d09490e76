"""Unit tests – streaming size monitor."""

import pytest
from starlette.responses import PlainTextResponse

from bodylimit.errors import LimitExceeded
from bodylimit.monitor import StreamingSession


def _source(*chunks: bytes):
    messages = [
        {"type": "http.request", "body": chunk, "more_body": i < len(chunks) - 1}
        for i, chunk in enumerate(chunks)
    ]
    pulled = []

    async def receive():
        message = messages.pop(0)
        pulled.append(message)
        return message

    return receive, pulled


def _responder(result):
    calls = []

    async def on_exceeded():
        calls.append(1)
        return result

    return on_exceeded, calls


async def _drain(session: StreamingSession) -> list[bytes]:
    seen = []
    while True:
        message = await session.receive()
        seen.append(message["body"])
        if not message["more_body"]:
            return seen


@pytest.mark.asyncio
async def test_body_under_cap_forwarded_unchanged():
    receive, _ = _source(b"abc", b"def")
    on_exceeded, calls = _responder(PlainTextResponse("no", status_code=413))
    session = StreamingSession(receive, 10, on_exceeded)

    assert await _drain(session) == [b"abc", b"def"]
    assert session.bytes_seen == 6
    assert not session.aborted
    assert calls == []


@pytest.mark.asyncio
async def test_body_exactly_at_cap_passes():
    receive, _ = _source(b"12345", b"67890")
    on_exceeded, calls = _responder(PlainTextResponse("no", status_code=413))
    session = StreamingSession(receive, 10, on_exceeded)

    assert await _drain(session) == [b"12345", b"67890"]
    assert calls == []


@pytest.mark.asyncio
async def test_crossing_chunk_is_dropped_and_stream_aborted():
    receive, pulled = _source(b"12345", b"678901", b"tail")
    response = PlainTextResponse("too large", status_code=413)
    on_exceeded, calls = _responder(response)
    session = StreamingSession(receive, 10, on_exceeded)

    first = await session.receive()
    assert first["body"] == b"12345"
    with pytest.raises(LimitExceeded) as exc_info:
        await session.receive()

    assert exc_info.value.max_bytes == 10
    assert exc_info.value.received == 11
    assert session.aborted
    assert session.response is response
    assert calls == [1]

    # Later reads fail without pulling more from the source.
    with pytest.raises(LimitExceeded):
        await session.receive()
    assert len(pulled) == 2


@pytest.mark.asyncio
async def test_handler_returning_none_releases_stream():
    receive, _ = _source(b"x" * 8, b"x" * 8, b"x" * 8)
    on_exceeded, calls = _responder(None)
    session = StreamingSession(receive, 10, on_exceeded)

    assert await _drain(session) == [b"x" * 8] * 3
    assert session.released
    assert not session.aborted
    assert calls == [1]


@pytest.mark.asyncio
async def test_non_body_messages_pass_through():
    async def receive():
        return {"type": "http.disconnect"}

    on_exceeded, _ = _responder(None)
    session = StreamingSession(receive, 0, on_exceeded)
    assert await session.receive() == {"type": "http.disconnect"}
    assert session.bytes_seen == 0
