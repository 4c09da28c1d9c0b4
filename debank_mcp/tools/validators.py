"""Shared argument helpers for DeBank MCP tools."""

from __future__ import annotations

from typing import Any, Optional


def is_blank(value: Any) -> bool:
    """
    Return True when a caller effectively omitted a value.

    ``None``, empty strings, ``False`` and zero count as omitted. Containers
    (including empty ones) count as supplied, so an empty ``tx`` object still
    reaches the upstream.
    """
    if value is None:
        return True
    if isinstance(value, (dict, list)):
        return False
    return not value


def coerce_positive_int(value: Optional[Any], *, default: int) -> int:
    """Coerce page-style integers, falling back to ``default`` when invalid or < 1."""
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    if parsed < 1:
        return default
    return parsed
