"""Contrato de los checks de verificación.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Cada check es independiente y de solo lectura: recibe el contexto y
  devuelve un `CheckResult`, sin estado compartido mutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from core.domain.models import CheckId, CheckResult, Issue
from core.domain.resources import ResourceSet
from core.exemptions import ExemptionRules


@dataclass(frozen=True)
class SourceFile:
    """A component source already read from disk."""

    path: str
    text: str


@dataclass(frozen=True)
class Thresholds:
    untranslated_min_length: int = 5
    quality_identical_min_length: int = 10


@dataclass(frozen=True)
class VerificationContext:
    """Read-only inputs shared by every check of one run."""

    resources: ResourceSet
    rules: ExemptionRules
    structural_issues: tuple[Issue, ...] = ()
    sources: tuple[SourceFile, ...] = ()
    thresholds: Thresholds = field(default_factory=Thresholds)


@runtime_checkable
class VerificationCheck(Protocol):
    """Contrato mínimo para un check.

    Reglas de diseño:
    - `run` es síncrono: todo el input ya está en memoria.
    - Devuelve un único `CheckResult`; nunca modifica el contexto.
    """

    check_id: CheckId

    def run(self, context: VerificationContext) -> CheckResult:
        """Ejecuta el check y devuelve el resultado con sus issues."""

        ...
