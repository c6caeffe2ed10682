"""Check 3: consistencia de variables de interpolación.

Un traductor que elimina o inventa un `{{token}}` rompe el render en
silencio; aquí se compara el conjunto de tokens de cada clave compartida.
"""

from __future__ import annotations

from core.checks.base import truncate
from core.domain.models import CheckId, CheckResult, Issue, IssueKind
from core.domain.tokens import diff_tokens
from core.interfaces.check import VerificationCheck, VerificationContext


class InterpolationCheck(VerificationCheck):
    check_id = CheckId.INTERPOLATION

    def run(self, context: VerificationContext) -> CheckResult:
        issues: list[Issue] = []
        for locale, namespace, reference, target in context.resources.iter_targets():
            for path, reference_value in reference.iter_text():
                target_value = target.text(path)
                if target_value is None:
                    continue
                missing, extra = diff_tokens(reference_value, target_value)
                if not missing and not extra:
                    continue
                parts = []
                if missing:
                    parts.append("missing: " + ", ".join(missing))
                if extra:
                    parts.append("extra: " + ", ".join(extra))
                issues.append(
                    Issue(
                        check_id=self.check_id,
                        kind=IssueKind.INTERPOLATION_MISMATCH,
                        locale=locale,
                        namespace=namespace,
                        key=path,
                        message=" | ".join(parts),
                        details={
                            "missing": missing,
                            "extra": extra,
                            "reference": truncate(reference_value),
                            "target": truncate(target_value),
                        },
                    )
                )
        return CheckResult(check_id=self.check_id, issues=issues)
