"""Turn arbitrary translation keys into identifiers a target language accepts."""

from __future__ import annotations

import re
from typing import AbstractSet

SAFE_PREFIX = "k_"

_UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9_]")


def sanitize_identifier(
    key: str,
    reserved: AbstractSet[str] = frozenset(),
    prefix: str = SAFE_PREFIX,
) -> str:
    """Return ``key`` rewritten as an identifier.

    ``"foo-bar"`` becomes ``"foo_bar"``, ``"123abc"`` becomes ``"k_123abc"``
    and a reserved word such as ``"class"`` becomes ``"class_"``.
    """

    cleaned = _UNSAFE_CHARACTERS.sub("_", key)
    if not cleaned or cleaned[0].isdigit():
        cleaned = f"{prefix}{cleaned}"
    if cleaned in reserved:
        cleaned = f"{cleaned}_"
    return cleaned


def unique_identifier(candidate: str, taken: AbstractSet[str]) -> str:
    """Append ``_2``, ``_3`` ... to ``candidate`` until it is not in ``taken``."""

    if candidate not in taken:
        return candidate
    index = 2
    while f"{candidate}_{index}" in taken:
        index += 1
    return f"{candidate}_{index}"


__all__ = ["SAFE_PREFIX", "sanitize_identifier", "unique_identifier"]
