"""
Declared-length fast path.

Looks only at ``Content-Length`` / ``Transfer-Encoding`` and never touches
the body.  Chunked requests are deferred to the streaming monitor.
"""

from __future__ import annotations

import enum
import re

from bodylimit.request import RequestView

_DECIMAL_RE = re.compile(r"^\s*\d+\s*$", re.ASCII)


class GateDecision(str, enum.Enum):
    PASS = "pass"
    DEFER = "defer"
    LENGTH_REQUIRED = "length_required"
    LIMIT_EXCEEDED = "limit_exceeded"


def parse_content_length(raw: str) -> int | None:
    """Parse a Content-Length value; ``None`` for anything malformed."""
    if not _DECIMAL_RE.match(raw):
        return None
    return int(raw)


def check_declared_length(
    view: RequestView,
    max_bytes: int | None,
    strict_content_length: bool = False,
) -> GateDecision:
    if not view.has_body:
        return GateDecision.PASS
    if view.chunked:
        return GateDecision.DEFER

    raw = view.content_length
    if raw is None:
        # Without strict mode the server's own framing bounds the body.
        return GateDecision.LENGTH_REQUIRED if strict_content_length else GateDecision.PASS

    length = parse_content_length(raw)
    # Malformed lengths pass; the server rejects bad framing itself.
    if length is None or max_bytes is None:
        return GateDecision.PASS
    if length > max_bytes:
        return GateDecision.LIMIT_EXCEEDED
    return GateDecision.PASS
