"""
12-Factor configuration helper.

Services protected by ``bodylimit`` read their settings from environment
variables.  This module provides the typed helpers they use.
"""

from __future__ import annotations

import os


def env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def env_int(key: str, default: int = 0) -> int:
    return int(os.environ.get(key, str(default)))


def env_bool(key: str, default: bool = False) -> bool:
    return os.environ.get(key, str(default)).lower() in ("1", "true", "yes")


def env_list(key: str, default: list[str] | None = None) -> list[str]:
    """Comma-separated list; blank items are dropped."""
    raw = os.environ.get(key)
    if raw is None:
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


# ── Shared defaults ───────────────────────────────────────────────────

PLATFORM_CEILING_ENV = "PLATFORM_MAX_REQUEST_BODY_BYTES"
