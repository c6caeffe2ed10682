"""Locale and namespace constants.

This module centralizes the locale set, the namespace set and the script
classification used by the checks. Keeping it in the domain layer allows the
loader, the checks and the CLI to share a single source of truth.
"""

from __future__ import annotations

import re
from enum import Enum

REFERENCE_LOCALE = "en"

TARGET_LOCALES: tuple[str, ...] = (
    "ar",
    "de",
    "es",
    "fr",
    "hi",
    "ja",
    "ko",
    "pt-BR",
    "zh-CN",
    "zh-TW",
)

NAMESPACES: tuple[str, ...] = (
    "common",
    "header",
    "dashboard",
    "dialogs",
    "settings",
    "actions",
    "install",
    "errors",
    "help",
    "statusbar",
)


class ScriptFamily(str, Enum):
    """Writing system a locale is expected to use."""

    LATIN = "latin"
    CJK = "cjk"
    ARABIC = "arabic"
    DEVANAGARI = "devanagari"

    def label(self) -> str:
        return _SCRIPT_LABELS[self]


_SCRIPT_LABELS: dict[ScriptFamily, str] = {
    ScriptFamily.LATIN: "Latin",
    ScriptFamily.CJK: "CJK",
    ScriptFamily.ARABIC: "Arabic",
    ScriptFamily.DEVANAGARI: "Devanagari",
}

# Keyed by primary language subtag.
_SCRIPT_BY_LANGUAGE: dict[str, ScriptFamily] = {
    "zh": ScriptFamily.CJK,
    "ja": ScriptFamily.CJK,
    "ko": ScriptFamily.CJK,
    "ar": ScriptFamily.ARABIC,
    "fa": ScriptFamily.ARABIC,
    "ur": ScriptFamily.ARABIC,
    "hi": ScriptFamily.DEVANAGARI,
    "mr": ScriptFamily.DEVANAGARI,
    "ne": ScriptFamily.DEVANAGARI,
}

# Inclusive code point ranges per script family.
SCRIPT_RANGES: dict[ScriptFamily, tuple[tuple[int, int], ...]] = {
    # CJK ideographs and punctuation, Hangul syllables, Hangul Jamo, compatibility Jamo.
    ScriptFamily.CJK: ((0x3000, 0x9FFF), (0xAC00, 0xD7AF), (0x1100, 0x11FF), (0x3130, 0x318F)),
    # Arabic, Supplement, Extended-A, Presentation Forms A and B.
    ScriptFamily.ARABIC: (
        (0x0600, 0x06FF),
        (0x0750, 0x077F),
        (0x08A0, 0x08FF),
        (0xFB50, 0xFDFF),
        (0xFE70, 0xFEFF),
    ),
    ScriptFamily.DEVANAGARI: ((0x0900, 0x097F), (0xA8E0, 0xA8FF)),
}


def _char_class(ranges: tuple[tuple[int, int], ...]) -> str:
    return "".join(f"{chr(lo)}-{chr(hi)}" for lo, hi in ranges)


SCRIPT_PATTERNS: dict[ScriptFamily, re.Pattern[str]] = {
    family: re.compile(f"[{_char_class(ranges)}]") for family, ranges in SCRIPT_RANGES.items()
}

# Everything that is neither an ASCII letter nor a letter of a checked script.
NON_SCRIPT_TEXT_RE = re.compile(
    "[^a-zA-Z"
    + _char_class(((0x0600, 0x06FF), (0x0900, 0x097F), (0x3000, 0x9FFF), (0xAC00, 0xD7AF)))
    + "]"
)


def classify_script(locale: str) -> ScriptFamily:
    """Return the script family expected for `locale` (Latin when unknown)."""

    language = locale.replace("_", "-").split("-", 1)[0].lower()
    return _SCRIPT_BY_LANGUAGE.get(language, ScriptFamily.LATIN)


def contains_script(value: str, family: ScriptFamily) -> bool:
    pattern = SCRIPT_PATTERNS.get(family)
    if pattern is None:
        return True
    return pattern.search(value) is not None
