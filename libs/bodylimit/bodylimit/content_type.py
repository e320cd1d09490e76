"""
Content-Type classification for deep inspection.

Only the base media type (``type/subtype``) takes part in block/allow list
lookups; parameters such as ``charset=utf-8`` are ignored.  A request with
no Content-Type header classifies as ``""``.
"""

from __future__ import annotations

from typing import AbstractSet


def normalize_content_type(raw: str | None) -> str:
    if not raw:
        return ""
    return raw.split(";", 1)[0].strip()


def should_inspect(
    content_type: str,
    block_list: AbstractSet[str],
    allow_list: AbstractSet[str],
) -> bool:
    """Decide whether a streamed body of *content_type* gets byte counting.

    The block list always wins, even for types that are also allow-listed.
    An empty allow list means every type not blocked is eligible.
    """
    if content_type in block_list:
        return False
    if allow_list and content_type not in allow_list:
        return False
    return True
