"""
Start-up cross-check against the host's own request body ceiling.

A cap at or above what the server accepts can never trigger, because the
server drops the connection first.  That is a configuration error and is
raised before the application serves anything.
"""

from __future__ import annotations

import logging
import os

from bodylimit.config import PLATFORM_CEILING_ENV
from bodylimit.errors import ConfigurationInvalid

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM_CEILING = 128 * 1024 * 1024  # 128 MiB


def resolve_platform_ceiling(configured: int | None = None) -> int:
    """Explicit value, else ``PLATFORM_MAX_REQUEST_BODY_BYTES``, else 128 MiB."""
    if configured is not None:
        return configured
    raw = os.environ.get(PLATFORM_CEILING_ENV)
    if raw:
        return int(raw)
    return DEFAULT_PLATFORM_CEILING


def validate_against_platform(max_bytes: int | None, ceiling: int) -> None:
    if max_bytes is None:
        return
    if max_bytes >= ceiling:
        raise ConfigurationInvalid(
            f"Configured body limit ({max_bytes} bytes) must be below the platform "
            f"request body ceiling ({ceiling} bytes)"
        )
    logger.debug("Body limit %d bytes validated against platform ceiling %d", max_bytes, ceiling)
