"""Check 2: completitud de claves (bidireccional).

Puramente estructural: compara conjuntos de key paths, nunca valores.
"""

from __future__ import annotations

from core.domain.models import CheckId, CheckResult, Issue, IssueKind
from core.domain.resources import NamespaceIndex
from core.interfaces.check import VerificationCheck, VerificationContext


def diff_keys(reference: NamespaceIndex, target: NamespaceIndex) -> tuple[list[str], list[str]]:
    """Return `(missing, orphan)` key paths, each in its source file order."""

    missing = [path for path in reference.paths if path not in target]
    orphan = [path for path in target.paths if path not in reference]
    return missing, orphan


class KeyCompletenessCheck(VerificationCheck):
    check_id = CheckId.COMPLETENESS

    def run(self, context: VerificationContext) -> CheckResult:
        issues: list[Issue] = []
        for locale, namespace, reference, target in context.resources.iter_targets():
            missing, orphan = diff_keys(reference, target)
            for path in missing:
                issues.append(
                    Issue(
                        check_id=self.check_id,
                        kind=IssueKind.MISSING,
                        locale=locale,
                        namespace=namespace,
                        key=path,
                        message="MISSING",
                    )
                )
            for path in orphan:
                issues.append(
                    Issue(
                        check_id=self.check_id,
                        kind=IssueKind.ORPHAN,
                        locale=locale,
                        namespace=namespace,
                        key=path,
                        message="ORPHAN",
                    )
                )
        return CheckResult(check_id=self.check_id, issues=issues)
