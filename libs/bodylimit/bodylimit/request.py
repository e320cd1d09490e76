"""Read-only view of the request attributes the size checks look at."""

from __future__ import annotations

from dataclasses import dataclass

from starlette.datastructures import Headers
from starlette.types import Scope

from bodylimit.content_type import normalize_content_type

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True, eq=False)
class RequestView:
    method: str
    path: str
    headers: Headers

    @classmethod
    def from_scope(cls, scope: Scope) -> "RequestView":
        return cls(
            method=scope.get("method", "GET").upper(),
            path=scope.get("path", ""),
            headers=Headers(scope=scope),
        )

    @property
    def content_length(self) -> str | None:
        """Raw Content-Length value, ``None`` when absent or empty."""
        return self.headers.get("content-length") or None

    @property
    def chunked(self) -> bool:
        return "transfer-encoding" in self.headers

    @property
    def content_type(self) -> str:
        return normalize_content_type(self.headers.get("content-type"))

    @property
    def has_body(self) -> bool:
        if "content-length" in self.headers or self.chunked:
            return True
        return self.method in BODY_METHODS
