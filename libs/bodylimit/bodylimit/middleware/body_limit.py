"""
Request body size-limiting middleware.

Order of checks for every HTTP request:

1. Declared-length gate: ``Content-Length`` against the cap, or 411 when
   strict mode requires the header.  A final decision here skips step 2.
2. Chunked bodies, when ``deep_inspect`` is on and the Content-Type passes
   the block/allow lists, get a :class:`StreamingSession` interposed on
   ``receive`` so the cap is enforced on the bytes that actually arrive.

The configured cap is checked against the server's own body ceiling when
the middleware is built, so a useless cap fails start-up instead of
silently never triggering.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from starlette.applications import Starlette
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from bodylimit.content_type import should_inspect
from bodylimit.gate import GateDecision, check_declared_length
from bodylimit.monitor import StreamingSession
from bodylimit.options import BodyLimitOptions
from bodylimit.platform import resolve_platform_ceiling, validate_against_platform
from bodylimit.policy import resolve_response
from bodylimit.request import RequestView

logger = logging.getLogger(__name__)


def _build_options(options: BodyLimitOptions | None, fields: dict[str, Any]) -> BodyLimitOptions:
    if options is None:
        return BodyLimitOptions(**fields)
    if fields:
        return BodyLimitOptions(**{**dict(options), **fields})
    return options


class BodyLimitMiddleware:
    def __init__(
        self,
        app: ASGIApp,
        options: BodyLimitOptions | None = None,
        platform_ceiling: int | None = None,
        _platform_checked: bool = False,
        **fields: Any,
    ):
        self.app = app
        self.options = _build_options(options, fields)
        self.platform_ceiling = resolve_platform_ceiling(platform_ceiling)
        # install_body_limit already ran the check at installation time.
        if self.options.validate_against_platform_limit and not _platform_checked:
            validate_against_platform(self.options.max_bytes, self.platform_ceiling)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        view = RequestView.from_scope(scope)
        decision = check_declared_length(view, self.options.max_bytes, self.options.strict_content_length)

        if decision is GateDecision.LENGTH_REQUIRED:
            response = await resolve_response(self.options.on_length_missing, view)
            if response is not None:
                logger.info("Rejected request without Content-Length", extra={"path": view.path})
                await response(scope, receive, send)
                return
        elif decision is GateDecision.LIMIT_EXCEEDED:
            response = await resolve_response(self.options.on_limit_exceeded, view)
            if response is not None:
                logger.info(
                    "Rejected request by declared length",
                    extra={"path": view.path, "limit": self.options.max_bytes, "declared": view.content_length},
                )
                await response(scope, receive, send)
                return
        elif decision is GateDecision.DEFER and self._should_monitor(view):
            await self._call_monitored(scope, receive, send, view)
            return

        await self.app(scope, receive, send)

    def _should_monitor(self, view: RequestView) -> bool:
        if not self.options.deep_inspect or self.options.max_bytes is None:
            return False
        return should_inspect(view.content_type, self.options.block_list, self.options.allow_list)

    async def _call_monitored(self, scope: Scope, receive: Receive, send: Send, view: RequestView) -> None:
        session = StreamingSession(
            receive,
            self.options.max_bytes or 0,
            functools.partial(resolve_response, self.options.on_limit_exceeded, view),
        )
        response_started = False

        async def guarded_send(message: Message) -> None:
            nonlocal response_started
            # After an abort the downstream's own reply is replaced by ours.
            if session.aborted and not response_started:
                return
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, session.receive, guarded_send)
        except Exception:
            if not session.aborted:
                raise
            logger.debug("Downstream failed after body abort", exc_info=True)

        if session.response is None:
            return

        if response_started:
            logger.warning(
                "Body limit crossed after the response had started",
                extra={"path": view.path, "limit": session.max_bytes, "received": session.bytes_seen},
            )
            return

        logger.info(
            "Rejected streamed request body",
            extra={"path": view.path, "limit": session.max_bytes, "received": session.bytes_seen},
        )
        await session.response(scope, receive, send)


def install_body_limit(
    app: Starlette,
    options: BodyLimitOptions | None = None,
    *,
    platform_ceiling: int | None = None,
    **fields: Any,
) -> BodyLimitOptions:
    """Validate *options* now and register :class:`BodyLimitMiddleware` on *app*.

    Starlette builds its middleware stack lazily, so the platform check is
    run here as well to fail at installation time rather than on first use.
    The platform ceiling is snapshotted once and handed to the middleware.
    """
    resolved = _build_options(options, fields)
    ceiling = resolve_platform_ceiling(platform_ceiling)
    if resolved.validate_against_platform_limit:
        validate_against_platform(resolved.max_bytes, ceiling)
    app.add_middleware(BodyLimitMiddleware, options=resolved, platform_ceiling=ceiling, _platform_checked=True)
    logger.info(
        "Body limit installed",
        extra={"limit": resolved.max_bytes, "deep_inspect": resolved.deep_inspect, "platform_ceiling": ceiling},
    )
    return resolved
