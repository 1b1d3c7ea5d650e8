"""Placeholder discovery and the reference interpolation semantics."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

PLACEHOLDER_PATTERN = re.compile(r"\{([a-zA-Z_][a-zA-Z0-9_]*)\}")


def infer_placeholders(values: Iterable[str]) -> set[str]:
    """Union the placeholder names found across every value."""

    found: set[str] = set()
    for value in values:
        found.update(PLACEHOLDER_PATTERN.findall(value))
    return found


def interpolate(template: str, params: Mapping[str, Any] | None = None) -> str:
    """Substitute every ``{name}`` token the way the generated code does.

    Missing or ``None`` parameters become the empty string, and so do tokens
    that have no parameter at all.
    """

    params = params or {}

    def _substitute(match: re.Match[str]) -> str:
        value = params.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


__all__ = [
    "PLACEHOLDER_PATTERN",
    "infer_placeholders",
    "interpolate",
]
