"""
Checks de consistencia y calidad sobre ResourceSets en memoria
"""

from core.checks import (
    InterpolationCheck,
    KeyCompletenessCheck,
    PlaceholderLeakageCheck,
    StructuralIntegrityCheck,
    TranslationQualityCheck,
    UntranslatedStringCheck,
)
from core.domain.models import CheckId, Issue, IssueKind
from core.interfaces.check import VerificationCheck, VerificationContext


def kinds(result):
    return [issue.kind for issue in result.issues]


class TestProtocol:
    """Todos los checks cumplen el contrato"""

    def test_runtime_checkable(self):
        for check in (
            StructuralIntegrityCheck(),
            KeyCompletenessCheck(),
            InterpolationCheck(),
            PlaceholderLeakageCheck(),
            UntranslatedStringCheck(),
            TranslationQualityCheck(),
        ):
            assert isinstance(check, VerificationCheck)


class TestStructuralIntegrity:
    """Publica los issues del loader"""

    def test_passes_without_issues(self, make_context):
        result = StructuralIntegrityCheck().run(make_context())

        assert result.passed
        assert result.check_id is CheckId.STRUCTURE

    def test_reports_loader_issues(self, make_context):
        issue = Issue(
            check_id=CheckId.STRUCTURE,
            kind=IssueKind.MISSING_FILE,
            locale="de",
            namespace="common",
            message="Missing file: common.json",
        )
        base = make_context()
        context = VerificationContext(resources=base.resources, rules=base.rules, structural_issues=(issue,))

        result = StructuralIntegrityCheck().run(context)

        assert not result.passed
        assert result.issues == [issue]


class TestKeyCompleteness:
    """Diferencia simétrica de key paths"""

    def test_equal_sets_pass(self, make_context):
        context = make_context(
            {"common": {"a": "A", "b": {"c": "C"}}},
            {"de": {"common": {"b": {"c": "X"}, "a": "Y"}}},
        )

        assert KeyCompletenessCheck().run(context).passed

    def test_missing_and_orphan(self, make_context):
        context = make_context(
            {"common": {"a": "A", "b": {"c": "C", "d": "D"}}},
            {"de": {"common": {"a": "A", "b": {"c": "C"}, "extra": "E"}}},
        )

        result = KeyCompletenessCheck().run(context)

        missing = [i.key for i in result.issues if i.kind is IssueKind.MISSING]
        orphan = [i.key for i in result.issues if i.kind is IssueKind.ORPHAN]
        assert missing == ["b.d"]
        assert orphan == ["extra"]
        assert result.issues[0].describe() == "[de] common -> b.d: MISSING"

    def test_absent_namespace_reports_every_reference_key(self, make_context):
        context = make_context(
            {"common": {"a": "A"}, "errors": {"x": "X", "y": "Y"}},
            {"de": {"common": {"a": "A"}}},
        )

        result = KeyCompletenessCheck().run(context)

        assert [(i.namespace, i.key) for i in result.issues] == [("errors", "x"), ("errors", "y")]

    def test_values_are_ignored(self, make_context):
        context = make_context({"common": {"a": "A"}}, {"de": {"common": {"a": ["array", "value"]}}})

        assert KeyCompletenessCheck().run(context).passed


class TestInterpolation:
    """Consistencia de tokens {{...}}"""

    def test_renamed_token(self, make_context):
        context = make_context(
            {"errors": {"timeout": "Timed out after {{seconds}}s"}},
            {"fr": {"errors": {"timeout": "Délai dépassé après {{sec}}s"}}},
        )

        result = InterpolationCheck().run(context)

        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.kind is IssueKind.INTERPOLATION_MISMATCH
        assert issue.details["missing"] == ["{{seconds}}"]
        assert issue.details["extra"] == ["{{sec}}"]
        assert issue.details["reference"] == "Timed out after {{seconds}}s"
        assert "missing: {{seconds}} | extra: {{sec}}" in issue.message

    def test_reordered_tokens_pass(self, make_context):
        context = make_context(
            {"common": {"range": "{{from}} to {{to}}"}},
            {"de": {"common": {"range": "bis {{to}} von {{from}}"}}},
        )

        assert InterpolationCheck().run(context).passed

    def test_non_string_values_skipped(self, make_context):
        context = make_context(
            {"common": {"list": ["{{a}}"], "n": "{{n}} items"}},
            {"de": {"common": {"list": ["x"], "n": 3}}},
        )

        assert InterpolationCheck().run(context).passed

    def test_long_values_truncated_in_details(self, make_context):
        long_value = "{{x}} " + "word " * 40
        context = make_context({"common": {"k": long_value}}, {"de": {"common": {"k": "ohne"}}})

        issue = InterpolationCheck().run(context).issues[0]

        assert issue.details["reference"].endswith("...")
        assert len(issue.details["reference"]) == 83


class TestPlaceholderLeakage:
    """Marcador [EN]"""

    def test_prefix_only_and_case_sensitive(self, make_context):
        context = make_context(
            {"common": {"a": "A", "b": "B", "c": "C", "d": "D"}},
            {
                "de": {
                    "common": {
                        "a": "[EN] Save",
                        "b": "Speichern [EN]",
                        "c": "[en] Save",
                        "d": "Speichern",
                        "orphan": "[EN] Orphan",
                    }
                }
            },
        )

        result = PlaceholderLeakageCheck().run(context)

        assert [i.key for i in result.issues] == ["a", "orphan"]
        assert all(i.kind is IssueKind.PLACEHOLDER for i in result.issues)

    def test_independent_of_exemptions(self, make_context):
        context = make_context({"common": {"a": "Docker"}}, {"de": {"common": {"a": "[EN]Docker"}}})

        assert not PlaceholderLeakageCheck().run(context).passed


class TestUntranslated:
    """Heurística de cadenas idénticas"""

    def test_identical_long_string_flagged(self, make_context):
        context = make_context(
            {"common": {"save": "Save", "settings": "Settings"}},
            {"de": {"common": {"save": "Save", "settings": "Settings"}}},
        )

        result = UntranslatedStringCheck().run(context)

        assert [i.key for i in result.issues] == ["settings"]
        assert result.issues[0].kind is IssueKind.SUSPICIOUS_IDENTICAL

    def test_length_boundary(self, make_context):
        context = make_context(
            {"common": {"five": "Hello", "six": "Hello!"}},
            {"de": {"common": {"five": "Hello", "six": "Hello!"}}},
        )

        result = UntranslatedStringCheck().run(context)

        assert [i.key for i in result.issues] == ["six"]

    def test_exemptions_apply(self, make_context):
        reference = {"common": {"term": "Windows Terminal", "status": "Status", "url": "https://aka.ms/wsl"}}
        context = make_context(reference, {"de": reference, "ja": reference})

        result = UntranslatedStringCheck().run(context)

        assert [(i.locale, i.key) for i in result.issues] == [("ja", "status")]

    def test_translated_values_pass(self, make_context):
        context = make_context(
            {"common": {"settings": "Settings"}},
            {"de": {"common": {"settings": "Einstellungen"}}},
        )

        assert UntranslatedStringCheck().run(context).passed


class TestTranslationQuality:
    """Presencia de script por familia"""

    def test_identical_long_cjk_value(self, make_context):
        context = make_context(
            {"common": {"restart": "Restart machine"}},
            {"zh-CN": {"common": {"restart": "Restart machine"}}},
        )

        result = TranslationQualityCheck().run(context)

        assert kinds(result) == [IssueKind.IDENTICAL_TO_ENGLISH]
        assert result.issues[0].locale == "zh-CN"

    def test_translated_without_expected_script(self, make_context):
        reference = {"common": {"open": "Open settings"}}
        context = make_context(
            reference,
            {
                "zh-CN": {"common": {"open": "Abrir ajustes"}},
                "ko": {"common": {"open": "설정 열기"}},
                "ar": {"common": {"open": "فتح الإعدادات"}},
                "hi": {"common": {"open": "Kholen settings"}},
                "ja": {"common": {"open": "設定を開く"}},
            },
        )

        result = TranslationQualityCheck().run(context)

        assert [(i.locale, i.kind, i.message) for i in result.issues] == [
            ("zh-CN", IssueKind.NO_EXPECTED_SCRIPT, "No CJK chars"),
            ("hi", IssueKind.NO_EXPECTED_SCRIPT, "No Devanagari chars"),
        ]

    def test_arabic_missing_script(self, make_context):
        context = make_context(
            {"common": {"open": "Open settings"}},
            {"ar": {"common": {"open": "Ouvrir les paramètres"}}},
        )

        result = TranslationQualityCheck().run(context)

        assert [i.message for i in result.issues] == ["No Arabic chars"]

    def test_latin_locales_skipped(self, make_context):
        context = make_context(
            {"common": {"restart": "Restart machine"}},
            {"de": {"common": {"restart": "Restart machine"}}},
        )

        assert TranslationQualityCheck().run(context).passed

    def test_exempt_values_skipped(self, make_context):
        context = make_context(
            {"common": {"term": "Windows Subsystem for Linux", "count": "{{n}} items here"}},
            {"ja": {"common": {"term": "Windows Subsystem for Linux", "count": "{{n}} GB"}}},
        )

        assert TranslationQualityCheck().run(context).passed

    def test_short_identical_value_passes(self, make_context):
        context = make_context(
            {"common": {"save": "Save file"}},
            {"ko": {"common": {"save": "Save file"}}},
        )

        assert TranslationQualityCheck().run(context).passed
