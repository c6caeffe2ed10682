"""Check 5: cadenas sin traducir (heurístico).

Marca valores idénticos a la referencia que superan el umbral de longitud y
que ninguna regla de exención cubre.
"""

from __future__ import annotations

from core.checks.base import truncate
from core.domain.models import CheckId, CheckResult, Issue, IssueKind
from core.interfaces.check import VerificationCheck, VerificationContext


class UntranslatedStringCheck(VerificationCheck):
    check_id = CheckId.UNTRANSLATED

    def run(self, context: VerificationContext) -> CheckResult:
        min_length = context.thresholds.untranslated_min_length
        rules = context.rules
        issues: list[Issue] = []
        for locale, namespace, reference, target in context.resources.iter_targets():
            for path, reference_value in reference.iter_text():
                if target.text(path) != reference_value:
                    continue
                if len(reference_value) <= min_length:
                    continue
                if rules.is_known_identical(reference_value, locale):
                    continue
                issues.append(
                    Issue(
                        check_id=self.check_id,
                        kind=IssueKind.SUSPICIOUS_IDENTICAL,
                        locale=locale,
                        namespace=namespace,
                        key=path,
                        message=f'"{truncate(reference_value, 60)}"',
                    )
                )
        return CheckResult(check_id=self.check_id, issues=issues)
