"""Check 7: calidad de traducción por presencia de script.

Para locales CJK, árabes o devanagari, un valor traducido debe contener al
menos un carácter de su script; y un valor idéntico a la referencia casi
nunca es legítimo.
"""

from __future__ import annotations

from core.checks.base import truncate
from core.domain.locales import NON_SCRIPT_TEXT_RE, ScriptFamily, classify_script, contains_script
from core.domain.models import CheckId, CheckResult, Issue, IssueKind
from core.domain.tokens import strip_tokens
from core.interfaces.check import VerificationCheck, VerificationContext

# Letters left after stripping tokens and foreign symbols.
MIN_REAL_TEXT = 3


class TranslationQualityCheck(VerificationCheck):
    check_id = CheckId.QUALITY

    def run(self, context: VerificationContext) -> CheckResult:
        rules = context.rules
        identical_min = context.thresholds.quality_identical_min_length
        issues: list[Issue] = []

        for locale, namespace, reference, target in context.resources.iter_targets():
            family = classify_script(locale)
            if family is ScriptFamily.LATIN:
                continue

            for path, reference_value in reference.iter_text():
                target_value = target.text(path)
                if target_value is None:
                    continue
                if rules.is_known_identical(reference_value, locale):
                    continue
                if rules.is_known_identical(target_value, locale):
                    continue
                real_text = NON_SCRIPT_TEXT_RE.sub("", strip_tokens(target_value))
                if len(real_text) < MIN_REAL_TEXT:
                    continue

                if target_value != reference_value and not contains_script(target_value, family):
                    issues.append(
                        Issue(
                            check_id=self.check_id,
                            kind=IssueKind.NO_EXPECTED_SCRIPT,
                            locale=locale,
                            namespace=namespace,
                            key=path,
                            message=f"No {family.label()} chars",
                            details={"target": truncate(target_value, 60), "script": family.value},
                        )
                    )

                if target_value == reference_value and len(reference_value) > identical_min:
                    issues.append(
                        Issue(
                            check_id=self.check_id,
                            kind=IssueKind.IDENTICAL_TO_ENGLISH,
                            locale=locale,
                            namespace=namespace,
                            key=path,
                            message="Identical to reference",
                            details={"target": truncate(target_value, 60), "script": family.value},
                        )
                    )

        return CheckResult(check_id=self.check_id, issues=issues)
