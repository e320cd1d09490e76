"""
Correlation-ID middleware.

Reads ``X-Correlation-Id`` from the incoming request (or creates a new UUID4)
and keeps it in a context variable so that every log line, including the
body-limit rejections, carries it.  The id is echoed on the response,
rejections included.
"""

from __future__ import annotations

import contextvars
import uuid

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

HEADER_NAME = "X-Correlation-Id"

_correlation_id_ctx: contextvars.ContextVar[str] = contextvars.ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    return _correlation_id_ctx.get("")


def set_correlation_id(value: str) -> None:
    _correlation_id_ctx.set(value)


class CorrelationMiddleware:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        cid = Headers(scope=scope).get(HEADER_NAME) or str(uuid.uuid4())
        token = _correlation_id_ctx.set(cid)

        async def send_with_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[HEADER_NAME] = cid
            await send(message)

        try:
            await self.app(scope, receive, send_with_id)
        finally:
            _correlation_id_ctx.reset(token)
