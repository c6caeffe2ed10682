"""Check 1: integridad estructural.

Los hallazgos los produce el loader (ficheros ausentes, JSON inválido,
número de ficheros, barrel ausente); este check solo los publica.
"""

from __future__ import annotations

from core.domain.models import CheckId, CheckResult
from core.interfaces.check import VerificationCheck, VerificationContext


class StructuralIntegrityCheck(VerificationCheck):
    check_id = CheckId.STRUCTURE

    def run(self, context: VerificationContext) -> CheckResult:
        return CheckResult(check_id=self.check_id, issues=list(context.structural_issues))
