"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los resultados de cada check se exportan tal cual (JSON/HTML), así que
  conviene que la serialización sea estable y validada.
- Las entidades describen *qué* se encontró, no *cómo* se verificó.

Nota:
- Los issues son append-only durante una ejecución; nunca se mutan.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


class CheckId(str, Enum):
    """Identifiers of the verification passes, in report order."""

    STRUCTURE = "structure"
    COMPLETENESS = "completeness"
    INTERPOLATION = "interpolation"
    PLACEHOLDERS = "placeholders"
    UNTRANSLATED = "untranslated"
    COVERAGE = "coverage"
    QUALITY = "quality"

    def label(self) -> str:
        """Human readable check name used in the report."""

        return _CHECK_LABELS[self]


_CHECK_LABELS: dict[CheckId, str] = {
    CheckId.STRUCTURE: "Structural Integrity",
    CheckId.COMPLETENESS: "Key Completeness",
    CheckId.INTERPOLATION: "Interpolation Variables",
    CheckId.PLACEHOLDERS: "No [EN] Placeholders",
    CheckId.UNTRANSLATED: "Untranslated Strings",
    CheckId.COVERAGE: "Component Coverage",
    CheckId.QUALITY: "Translation Quality",
}


class IssueKind(str, Enum):
    MISSING_FILE = "missing-file"
    PARSE_ERROR = "parse-error"
    FILE_COUNT = "file-count"
    MISSING_INDEX = "missing-index"
    MISSING_LOCALE = "missing-locale"
    FATAL = "fatal"
    MISSING = "MISSING"
    ORPHAN = "ORPHAN"
    INTERPOLATION_MISMATCH = "interpolation-mismatch"
    PLACEHOLDER = "placeholder"
    SUSPICIOUS_IDENTICAL = "suspicious-identical"
    NO_EXPECTED_SCRIPT = "no-expected-script"
    IDENTICAL_TO_ENGLISH = "identical-to-english"
    HARDCODED_TEXT = "hardcoded-text"
    HARDCODED_ATTRIBUTE = "hardcoded-attribute"


class Issue(BaseModel):
    """Un hallazgo concreto de un check.

    `key` es el key-path dentro del namespace o, para el scanner de fuentes,
    la ruta del fichero.
    """

    model_config = ConfigDict(frozen=True)

    check_id: CheckId = Field(..., description="Check que produjo el issue.")
    kind: IssueKind = Field(..., description="Tipo de defecto detectado.")
    locale: str | None = Field(
        default=None,
        description="Locale afectado (None para hallazgos de código fuente).",
    )
    namespace: str | None = Field(
        default=None,
        description="Namespace afectado (p.ej. 'common').",
    )
    key: str | None = Field(
        default=None,
        description="Key path o fichero fuente afectado.",
    )
    message: str = Field(..., min_length=1, description="Descripción legible.")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Datos de diagnóstico (tokens, valores comparados, etc.).",
    )

    def describe(self) -> str:
        """One-line (or few-line) rendering used by the console report."""

        prefix = ""
        if self.locale:
            prefix += f"[{self.locale}] "
        if self.namespace and self.key:
            prefix += f"{self.namespace} -> {self.key}: "
        elif self.namespace:
            prefix += f"{self.namespace}: "
        elif self.key:
            prefix += f"{self.key}: "
        return prefix + self.message


class CheckResult(BaseModel):
    """Resultado de un check: pasa si y solo si no hay issues."""

    check_id: CheckId
    issues: list[Issue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        return self.check_id.label()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return not self.issues


class LocaleStats(BaseModel):
    """Key counts of one target locale against the reference locale."""

    locale: str
    reference_keys: int = Field(default=0, ge=0)
    present_keys: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def coverage(self) -> float:
        if not self.reference_keys:
            return 1.0
        return self.present_keys / self.reference_keys


class VerificationReport(BaseModel):
    """Agregado final de una ejecución.

    Por qué un agregado:
    - La CLI, el export JSON y el export HTML presentan exactamente el mismo
      contenido; el estado global se deriva de aquí y solo de aquí.
    """

    results: list[CheckResult] = Field(default_factory=list)
    locale_stats: list[LocaleStats] = Field(default_factory=list)
    fatal_error: str | None = Field(
        default=None,
        description="Condición irrecuperable (p.ej. locale de referencia ausente).",
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de generación del reporte (UTC).",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return self.fatal_error is None and all(r.passed for r in self.results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exit_code(self) -> int:
        if self.fatal_error is not None:
            return 2
        return 0 if self.passed else 1

    def result_for(self, check_id: CheckId) -> CheckResult | None:
        for result in self.results:
            if result.check_id is check_id:
                return result
        return None
