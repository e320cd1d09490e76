"""Resolved body-limit configuration for one protected application."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from bodylimit.config import env, env_bool, env_list
from bodylimit.content_type import normalize_content_type
from bodylimit.policy import Responder, length_required, payload_too_large
from bodylimit.units import parse_size


class BodyLimitOptions(BaseModel):
    """Immutable options; ``max_size`` is stored already converted to bytes.

    ``block_list`` and ``allow_list`` hold normalized media types, so
    ``"text/plain; charset=utf-8"`` is stored as ``"text/plain"``.  Use
    ``""`` to address requests without a Content-Type.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_size: int | None = None
    validate_against_platform_limit: bool = True
    strict_content_length: bool = False
    deep_inspect: bool = False
    block_list: frozenset[str] = frozenset()
    allow_list: frozenset[str] = frozenset()
    on_length_missing: Responder = length_required
    on_limit_exceeded: Responder = payload_too_large

    @field_validator("max_size", mode="before")
    @classmethod
    def _parse_max_size(cls, value: Any) -> int | None:
        return parse_size(value)

    @field_validator("block_list", "allow_list", mode="after")
    @classmethod
    def _normalize_types(cls, value: frozenset[str]) -> frozenset[str]:
        return frozenset(normalize_content_type(item) for item in value)

    @property
    def max_bytes(self) -> int | None:
        return self.max_size

    @classmethod
    def from_env(cls, prefix: str = "BODY_LIMIT_", **overrides: Any) -> "BodyLimitOptions":
        values: dict[str, Any] = {
            "max_size": env(f"{prefix}MAX_SIZE") or None,
            "validate_against_platform_limit": env_bool(f"{prefix}VALIDATE_PLATFORM_LIMIT", True),
            "strict_content_length": env_bool(f"{prefix}STRICT_CONTENT_LENGTH"),
            "deep_inspect": env_bool(f"{prefix}DEEP_INSPECT"),
            "block_list": env_list(f"{prefix}BLOCK_LIST"),
            "allow_list": env_list(f"{prefix}ALLOW_LIST"),
        }
        values.update(overrides)
        return cls(**values)
