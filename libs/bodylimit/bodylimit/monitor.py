"""
Streaming size monitor.

Used for bodies whose length is not declared up front (chunked transfer).
The byte count comes from what actually arrives, never from headers.

``StreamingSession`` wraps one request's ASGI ``receive`` callable.  Each
``http.request`` message is counted and then handed on untouched, so at
most one message is in flight and the server's backpressure is unchanged.
Once the count goes past the cap the session either aborts (drops the
chunk and raises :class:`~bodylimit.errors.LimitExceeded` into whoever is
reading the body) or, when the limit handler declines, is released and
stops counting.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import Message, Receive

from bodylimit.errors import LimitExceeded

logger = logging.getLogger(__name__)

OnExceeded = Callable[[], Awaitable["Response | None"]]


class StreamingSession:
    """Byte counter for a single request body."""

    def __init__(self, receive: Receive, max_bytes: int, on_exceeded: OnExceeded):
        self._receive = receive
        self.max_bytes = max_bytes
        self._on_exceeded = on_exceeded
        self.bytes_seen = 0
        self.response: Response | None = None
        self.released = False

    @property
    def aborted(self) -> bool:
        return self.response is not None

    async def receive(self) -> Message:
        if self.aborted:
            raise LimitExceeded(self.max_bytes, self.bytes_seen)

        message = await self._receive()
        if self.released or message["type"] != "http.request":
            return message

        self.bytes_seen += len(message.get("body", b""))
        if self.bytes_seen <= self.max_bytes:
            return message

        response = await self._on_exceeded()
        if response is None:
            logger.info(
                "Body limit handler let oversized stream continue",
                extra={"limit": self.max_bytes, "received": self.bytes_seen},
            )
            self.released = True
            return message

        self.response = response
        raise LimitExceeded(self.max_bytes, self.bytes_seen)


async def read_limited_body(request: Request, max_bytes: int) -> bytes:
    """Read *request*'s body, raising ``LimitExceeded`` past *max_bytes*.

    For route-level caps tighter than the application-wide one.  Counting
    is strict: a body of exactly *max_bytes* is accepted.
    """
    body = bytearray()
    async for chunk in request.stream():
        if len(body) + len(chunk) > max_bytes:
            raise LimitExceeded(max_bytes, len(body) + len(chunk))
        body.extend(chunk)
    return bytes(body)
