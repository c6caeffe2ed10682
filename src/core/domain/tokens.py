"""Interpolation tokens (`{{name}}`).

A token is the literal text from `{{` to the next `}}`; it is compared as an
opaque atom, never parsed.
"""

from __future__ import annotations

import re

INTERPOLATION_RE = re.compile(r"\{\{[^}]+\}\}")


def extract_tokens(value: str) -> list[str]:
    """Return the distinct tokens of `value` in order of first appearance."""

    return list(dict.fromkeys(INTERPOLATION_RE.findall(value)))


def strip_tokens(value: str) -> str:
    return INTERPOLATION_RE.sub("", value)


def diff_tokens(reference: str, target: str) -> tuple[list[str], list[str]]:
    """Return `(missing, extra)` tokens of `target` relative to `reference`."""

    reference_tokens = extract_tokens(reference)
    target_tokens = extract_tokens(target)
    missing = [t for t in reference_tokens if t not in target_tokens]
    extra = [t for t in target_tokens if t not in reference_tokens]
    return missing, extra
