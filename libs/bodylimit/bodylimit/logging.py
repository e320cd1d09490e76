"""
Structured logging for services protected by ``bodylimit``.

Call ``setup_logging()`` once at service startup.  Every record gets the
service name and the request's correlation id; body-limit rejections add
their own fields (``path``, ``limit``, ``declared`` / ``received``), which
the JSON formatter emits as top-level keys.

The ``bodylimit`` logger can be tuned on its own, since rejections are
logged at INFO and may be noisy behind a public endpoint.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger import jsonlogger

LIBRARY_LOGGER = "bodylimit"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(service)s %(name)s (%(correlation_id)s) %(message)s"
_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(correlation_id)s %(message)s"


class _RequestContextFilter(logging.Filter):
    """Stamp the service name and current correlation id on each record."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        from bodylimit.middleware.correlation import get_correlation_id

        record.correlation_id = get_correlation_id()  # type: ignore[attr-defined]
        record.service = self.service_name  # type: ignore[attr-defined]
        return True


def _formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return jsonlogger.JsonFormatter(
            fmt=_JSON_FORMAT,
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    return logging.Formatter(_TEXT_FORMAT)


def setup_logging(service_name: str, level: str, fmt: str, library_level: str = "") -> None:
    """Route all logging to stdout in *fmt* (``json`` or ``text``).

    *library_level* overrides the level of the ``bodylimit`` loggers only;
    empty leaves them at the root level.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_formatter(fmt))
    handler.addFilter(_RequestContextFilter(service_name))

    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger(LIBRARY_LOGGER).setLevel(library_level.upper() if library_level else logging.NOTSET)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.getLogger(service_name).info("Logging initialised", extra={"log_format": fmt})
