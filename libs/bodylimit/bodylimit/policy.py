"""
Violation responders.

A responder receives the :class:`~bodylimit.request.RequestView` of the
offending request and returns the terminal response.  Returning ``None``
lets the request continue instead.  Responders may be plain functions or
coroutines.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Union

from starlette.responses import JSONResponse, Response

from bodylimit.request import RequestView

Responder = Callable[[RequestView], Union[Response, None, Awaitable[Union[Response, None]]]]


def length_required(view: RequestView) -> Response:
    return JSONResponse(
        status_code=411,
        content={"error": "length_required", "detail": "Content-Length header is required"},
    )


def payload_too_large(view: RequestView) -> Response:
    return JSONResponse(
        status_code=413,
        content={"error": "payload_too_large", "detail": "Request body exceeds the allowed size"},
    )


async def resolve_response(responder: Responder, view: RequestView) -> Response | None:
    result: Any = responder(view)
    if inspect.isawaitable(result):
        result = await result
    if result is None or isinstance(result, Response):
        return result
    raise TypeError(f"Responder {responder!r} returned {type(result).__name__}, expected a Response or None")
