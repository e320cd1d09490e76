"""Human size expressions (``1024``, ``"512k"``, ``"10m"``) to byte counts."""

from __future__ import annotations

import re

_SIZE_RE = re.compile(r"^\s*(\d+)\s*([a-z]*)\s*$", re.IGNORECASE | re.ASCII)

_MULTIPLIERS = {
    "": 1,
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "m": 1024**2,
    "mb": 1024**2,
    "g": 1024**3,
    "gb": 1024**3,
}


def parse_size(value: int | str | None) -> int | None:
    """Return *value* as a byte count.

    ``None`` means "no cap" and is returned unchanged.  Units are binary,
    so ``"1k"`` is 1024 bytes.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid size: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Size must be non-negative, got {value}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid size: {value!r}")

    match = _SIZE_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid size: {value!r}")
    number, unit = match.groups()
    multiplier = _MULTIPLIERS.get(unit.lower())
    if multiplier is None:
        raise ValueError(f"Unknown size unit {unit!r} in {value!r}")
    return int(number) * multiplier
