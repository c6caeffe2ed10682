"""Check 4: marcadores `[EN]` olvidados.

`[EN]` al inicio de un valor marca una traducción provisional; en un set
publicado siempre es un defecto, sin excepciones.
"""

from __future__ import annotations

from core.checks.base import truncate
from core.domain.models import CheckId, CheckResult, Issue, IssueKind
from core.interfaces.check import VerificationCheck, VerificationContext

PLACEHOLDER_MARKER = "[EN]"


class PlaceholderLeakageCheck(VerificationCheck):
    check_id = CheckId.PLACEHOLDERS

    def __init__(self, marker: str = PLACEHOLDER_MARKER) -> None:
        self._marker = marker

    def run(self, context: VerificationContext) -> CheckResult:
        issues: list[Issue] = []
        for locale, namespace, _reference, target in context.resources.iter_targets():
            for path, value in target.iter_text():
                if not value.startswith(self._marker):
                    continue
                issues.append(
                    Issue(
                        check_id=self.check_id,
                        kind=IssueKind.PLACEHOLDER,
                        locale=locale,
                        namespace=namespace,
                        key=path,
                        message=f'"{truncate(value, 60)}"',
                    )
                )
        return CheckResult(check_id=self.check_id, issues=issues)
