"""Check 6: cobertura de componentes (texto visible hardcodeado).

Heurística léxica sobre el código fuente, sin acceso a los recursos:
- Texto JSX entre etiquetas (`>texto<`).
- Valores literales de atributos visibles (`title`, `placeholder`,
  `aria-label`, `label`).

Es ruidosa a propósito; su objetivo es detectar regresiones (texto nuevo sin
`t()`), no ser exhaustiva.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.checks.base import truncate
from core.domain.models import CheckId, CheckResult, Issue, IssueKind
from core.exemptions import ExemptionRules
from core.interfaces.check import VerificationCheck, VerificationContext

USER_FACING_ATTRIBUTES: tuple[str, ...] = ("title", "placeholder", "aria-label", "label")

HTML_TAGS: frozenset[str] = frozenset(
    {
        "div", "span", "button", "input", "select", "option", "form", "label",
        "section", "header", "footer", "main", "nav", "aside",
    }
)

_JSX_TEXT_RE = re.compile(r">([^<>{}`\n]+)<")
_ATTRIBUTE_RES: dict[str, re.Pattern[str]] = {
    name: re.compile(rf'(?<![\w-]){re.escape(name)}="([^"]+)"') for name in USER_FACING_ATTRIBUTES
}

_NUMERIC_RE = re.compile(r"^[\d.%px,\s]+$")
_HAS_LETTER_RE = re.compile(r"[a-zA-Z]")
_HAS_WORD_RE = re.compile(r"[a-zA-Z]{2,}")
_CLASS_TOKEN_PREFIX_RE = re.compile(r"^[a-z]+-[a-z]+", re.IGNORECASE)
_CLASS_TOKEN_RE = re.compile(r"^[a-z]+-[a-z]+$", re.IGNORECASE)
_IDENTIFIER_RE = re.compile(r"^[a-z][a-zA-Z]+$")
_DIGITS_RE = re.compile(r"^\d+$")
_CONSTANT_RE = re.compile(r"^[A-Z_]+$")
_VERSION_RE = re.compile(r"^v\d")
_CAPITALIZED_RE = re.compile(r"^[A-Z][a-z]+")
_ATTRIBUTE_LIKE_RE = re.compile(r"^(className|data-|aria-|key=|ref=|id=)")
_CODE_RE = re.compile(r"&&|\|\||^\s*:")


@dataclass(frozen=True)
class Candidate:
    """A literal that looks like untranslated user-facing text."""

    text: str
    attribute: str | None = None


def _is_numeric(text: str) -> bool:
    return _NUMERIC_RE.match(text) is not None and _HAS_LETTER_RE.search(text) is None


def is_jsx_candidate(text: str, rules: ExemptionRules) -> bool:
    """Filter for text found between two markup delimiters (already stripped)."""

    if len(text) <= 1:
        return False
    if _is_numeric(text):
        return False
    if _CLASS_TOKEN_PREFIX_RE.match(text) and " " not in text:
        return False
    if text.startswith("{") or text.endswith("}"):
        return False
    if (
        _IDENTIFIER_RE.match(text)
        or _DIGITS_RE.match(text)
        or _CONSTANT_RE.match(text)
        or _VERSION_RE.match(text)
    ):
        return False
    if not _HAS_WORD_RE.search(text):
        return False
    multi_word = " " in text
    single_visible_word = (
        not multi_word and len(text) >= 4 and _CAPITALIZED_RE.match(text) is not None and "." not in text
    )
    if not multi_word and not single_visible_word:
        return False
    if _ATTRIBUTE_LIKE_RE.match(text):
        return False
    if "=" in text or "${" in text:
        return False
    if _CODE_RE.search(text):
        return False
    if rules.is_technical_term(text):
        return False
    return text.lower() not in HTML_TAGS


def is_attribute_candidate(text: str, rules: ExemptionRules) -> bool:
    """Filter for a literal attribute value (already stripped)."""

    if len(text) <= 1:
        return False
    if text.startswith("{") or "${" in text:
        return False
    if _is_numeric(text):
        return False
    if _CLASS_TOKEN_RE.match(text):
        return False
    if not _HAS_WORD_RE.search(text) or rules.is_technical_term(text):
        return False
    return not (_IDENTIFIER_RE.match(text) and " " not in text)


def scan_source(text: str, rules: ExemptionRules) -> list[Candidate]:
    """Run both extraction passes over one file, deduplicated by string."""

    found: list[Candidate] = []
    seen: set[str] = set()

    def _add(candidate: Candidate) -> None:
        if candidate.text in seen:
            return
        seen.add(candidate.text)
        found.append(candidate)

    for match in _JSX_TEXT_RE.finditer(text):
        value = match.group(1).strip()
        if is_jsx_candidate(value, rules):
            _add(Candidate(text=value))

    for name, pattern in _ATTRIBUTE_RES.items():
        for match in pattern.finditer(text):
            value = match.group(1).strip()
            if is_attribute_candidate(value, rules):
                _add(Candidate(text=value, attribute=name))

    return found


class SourceCoverageCheck(VerificationCheck):
    check_id = CheckId.COVERAGE

    def run(self, context: VerificationContext) -> CheckResult:
        issues: list[Issue] = []
        for source in context.sources:
            for candidate in scan_source(source.text, context.rules):
                if candidate.attribute is None:
                    kind = IssueKind.HARDCODED_TEXT
                    message = f'"{truncate(candidate.text, 60)}"'
                else:
                    kind = IssueKind.HARDCODED_ATTRIBUTE
                    message = f'[prop] {candidate.attribute}="{truncate(candidate.text, 50)}"'
                issues.append(
                    Issue(
                        check_id=self.check_id,
                        kind=kind,
                        key=source.path,
                        message=message,
                        details={"text": candidate.text},
                    )
                )
        return CheckResult(check_id=self.check_id, issues=issues)
