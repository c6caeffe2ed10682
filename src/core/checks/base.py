"""Utilidades compartidas por los checks."""

from __future__ import annotations


def truncate(value: object, max_chars: int = 80) -> str:
    """Shorten a value for display, appending `...` when cut."""

    text = value if isinstance(value, str) else str(value)
    if len(text) > max_chars:
        return text[:max_chars] + "..."
    return text
