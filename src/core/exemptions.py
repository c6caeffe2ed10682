"""Exemption rules for the heuristic checks.

Why a rule chain:
- Each heuristic is a small named predicate that can be tested on its own.
- New patterns are appended to the chain without touching existing ones.

`ExemptionRules` is immutable configuration built once per run and passed
explicitly to the checks that need it; tests can build a reduced set.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple

from core.domain.tokens import strip_tokens

DEFAULT_TECHNICAL_TERMS: frozenset[str] = frozenset(
    {
        "WSL", "WSL 1", "WSL 2", "WSLg", "WSL UI", "WSL Global", "WSL GitHub",
        "VHDX", "VHD", "ext4", "ext3", "NTFS", "Btrfs", "XFS", "FAT32", "exFAT",
        "NTFS (Windows)",
        "Docker", "Podman",
        "IP", "CPU", "GPU", "DNS", "NAT", "UNC", "GUI", "VM", "OCI", "UAC",
        "GB", "TB", "MB", "KB", "SSH", "HTTP", "HTTPS", "URL", "API", "CLI", "IDE",
        "DXCore", "MSRDC", "Direct3D", "systemd", "dmesg", "fstab", "fstrim", "sudo", "xrdp",
        "Linux", "Windows", "Ubuntu", "Debian", "Fedora", "Arch",
        "Tauri", "React", "Rust", "GitHub", "Aptabase",
        "VS Code", "Cursor", "Alacritty", "Kitty", "WezTerm", "IntelliJ",
        "Visual Studio Code", "Windows Terminal", "Windows Terminal Preview",
        "PowerShell", "Windows Subsystem for Linux", "Command Prompt",
        "Apache License 2.0", "Business Source License 1.1",
        "N/A", "Linux Containers", "Octasoft Ltd",
        "Escape", "Promise",
        # Identical in many European languages
        "Terminal", "Installation", "Updates", "Hostname", "Interop",
        "Community", "Container", "Download",
        "Name *", "Error:",
        # Identical in French/Spanish/Portuguese
        "Options", "Source", "Configuration", "Application", "Accent", "Danger",
        "Variables", "Description", "Instances",
        "distribution", "distributions",
    }
)

_EUROPEAN = frozenset({"de", "fr", "es", "pt-BR"})

DEFAULT_LOCALE_IDENTICAL: Mapping[str, frozenset[str]] = MappingProxyType({
    "Status": _EUROPEAN,
    "Online": _EUROPEAN,
    "Offline": _EUROPEAN,
    "Version": frozenset({"de", "fr"}),
    "Partition": frozenset({"de", "fr"}),
    "Partition (optional)": frozenset({"de", "fr"}),
    "Online ({{count}})": frozenset({"de", "pt-BR"}),
    "Offline ({{count}})": frozenset({"de", "pt-BR"}),
    "in {{hours}}h": frozenset({"de"}),
})

DEFAULT_COMMON_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "is", "are", "to", "for", "in", "on", "of",
        "with", "and", "or", "but", "not", "this", "that", "it", "by",
    }
)


Predicate = Callable[[str, "str | None", "ExemptionRules"], bool]


class ExemptionRule(NamedTuple):
    name: str
    predicate: Predicate


_NON_LETTER_RE = re.compile(r"[^a-zA-Z]")
_DURATION_RE = re.compile(r"^\d+\s*(second|seconds|minute|minutes|hour|hours|week|weeks)$", re.IGNORECASE)
_URL_RE = re.compile(r"^https?://")
_SHORTCUT_RE = re.compile(r"^(Ctrl|Alt|Shift|Meta|Cmd)\+", re.IGNORECASE)
_VERSION_RE = re.compile(r"^v?\d+(\.\d+)+")
_NUMBER_UNIT_RE = re.compile(r"^\d+(\.\d+)?\s*(GB|TB|MB|KB|ms|s|%)?$", re.IGNORECASE)
_ENV_VAR_RE = re.compile(r"\$[A-Z_]")
_EXECUTABLE_RE = re.compile(r"\.exe\b")
_CLI_FLAG_RE = re.compile(r"--[a-z]")
_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_TITLE_PHRASE_RE = re.compile(r"^[A-Z][a-z]+ [A-Z]")


def is_trivial(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return len(text) < 3


def is_technical_term(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return text in rules.technical_terms


def is_locale_identical(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    if not locale:
        return False
    return locale in rules.locale_identical.get(text, frozenset())


def is_interpolation_dominated(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    """`"in {{hours}}h"` leaves `"inh"`: too few letters to need translating."""

    remainder = strip_tokens(text).strip()
    if not remainder:
        return True
    if remainder in rules.technical_terms:
        return True
    return len(_NON_LETTER_RE.sub("", remainder)) <= 3


def is_duration(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _DURATION_RE.match(text) is not None


def is_url(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _URL_RE.match(text) is not None


def is_path(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    # UNC paths, Windows paths and \\wsl$ shares.
    return "\\" in text or "wsl$" in text


def is_keyboard_shortcut(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _SHORTCUT_RE.match(text) is not None


def is_version(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _VERSION_RE.match(text) is not None


def is_number_with_unit(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _NUMBER_UNIT_RE.match(text) is not None


def is_env_variable(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _ENV_VAR_RE.search(text) is not None


def is_executable(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _EXECUTABLE_RE.search(text) is not None


def is_cli_flag(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _CLI_FLAG_RE.search(text) is not None and " " in text


def is_email(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    return _EMAIL_RE.search(text) is not None


def is_title_case_phrase(text: str, locale: str | None, rules: ExemptionRules) -> bool:
    """Proxy for proper nouns: `"Windows Update Service"`, not `"Open the File"`."""

    if _TITLE_PHRASE_RE.match(text) is None:
        return False
    if len(text.split(" ")) > rules.max_title_words:
        return False
    return _common_words_re(rules.common_words).search(text) is None


@lru_cache(maxsize=8)
def _common_words_re(words: frozenset[str]) -> re.Pattern[str]:
    if not words:
        return re.compile(r"(?!)")
    alternation = "|".join(re.escape(w) for w in sorted(words))
    return re.compile(rf"\b({alternation})\b", re.IGNORECASE)


DEFAULT_CHAIN: tuple[ExemptionRule, ...] = (
    ExemptionRule("trivial", is_trivial),
    ExemptionRule("technical-term", is_technical_term),
    ExemptionRule("locale-identical", is_locale_identical),
    ExemptionRule("interpolation-dominated", is_interpolation_dominated),
    ExemptionRule("duration", is_duration),
    ExemptionRule("url", is_url),
    ExemptionRule("path", is_path),
    ExemptionRule("keyboard-shortcut", is_keyboard_shortcut),
    ExemptionRule("version", is_version),
    ExemptionRule("number-with-unit", is_number_with_unit),
    ExemptionRule("env-variable", is_env_variable),
    ExemptionRule("executable", is_executable),
    ExemptionRule("cli-flag", is_cli_flag),
    ExemptionRule("email", is_email),
    ExemptionRule("title-case-phrase", is_title_case_phrase),
)


@dataclass(frozen=True)
class ExemptionRules:
    """Immutable knowledge base consulted by the heuristic checks."""

    technical_terms: frozenset[str] = DEFAULT_TECHNICAL_TERMS
    locale_identical: Mapping[str, frozenset[str]] = field(default_factory=lambda: DEFAULT_LOCALE_IDENTICAL)
    common_words: frozenset[str] = DEFAULT_COMMON_WORDS
    max_title_words: int = 4
    chain: tuple[ExemptionRule, ...] = DEFAULT_CHAIN

    def __post_init__(self) -> None:
        # Read-only copy: callers keep no handle on the stored table.
        table = {text: frozenset(locales) for text, locales in self.locale_identical.items()}
        object.__setattr__(self, "locale_identical", MappingProxyType(table))

    def matching_rule(self, value: object, locale: str | None = None) -> str | None:
        """Return the name of the first rule exempting `value`, if any."""

        if not isinstance(value, str):
            return "non-text"
        text = value.strip()
        for rule in self.chain:
            if rule.predicate(text, locale, self):
                return rule.name
        return None

    def is_known_identical(self, value: object, locale: str | None = None) -> bool:
        """True when `value` is expected to be identical across locales."""

        return self.matching_rule(value, locale) is not None

    def is_technical_term(self, value: str) -> bool:
        return value.strip() in self.technical_terms


def default_rules() -> ExemptionRules:
    return ExemptionRules()
