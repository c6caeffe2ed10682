"""
Pipeline de verificación completo y exportadores
"""

import json

from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html, render_report_html
from core.domain.models import CheckId, IssueKind
from core.services.verification_pipeline import PipelineHooks, VerifyRequest, default_checks, verify


class TestVerify:
    """Orquestación de punta a punta sobre un proyecto en disco"""

    def test_clean_project_passes(self, clean_project):
        report = verify(settings=clean_project.settings())

        assert report.passed
        assert report.exit_code == 0
        assert report.fatal_error is None
        assert [r.check_id for r in report.results] == list(CheckId)

    def test_placeholder_fails_run(self, clean_project):
        clean_project.write_namespace(
            "de", "common", {"ok": "OK", "actions": {"save": "[EN] Save", "quit": "Quit"}, "shortcuts": []}
        )

        report = verify(settings=clean_project.settings())

        assert not report.passed
        assert report.exit_code == 1
        failing = [r.check_id for r in report.results if not r.passed]
        assert failing == [CheckId.PLACEHOLDERS]
        assert report.result_for(CheckId.PLACEHOLDERS).issues[0].key == "actions.save"

    def test_hardcoded_component_fails_run(self, clean_project):
        clean_project.add_component("Toolbar.tsx", "<button>Submit Now</button>\n")

        report = verify(settings=clean_project.settings())

        coverage = report.result_for(CheckId.COVERAGE)
        assert [i.key for i in coverage.issues] == ["src/components/Toolbar.tsx"]
        assert report.exit_code == 1

    def test_non_utf8_component_is_still_scanned(self, clean_project):
        path = clean_project.components_dir / "Raw.tsx"
        path.write_bytes(b"// \xe9t\xe9\n<p>Broken Bytes</p>\n")

        report = verify(settings=clean_project.settings())

        coverage = report.result_for(CheckId.COVERAGE)
        assert [(i.key, i.details["text"]) for i in coverage.issues] == [("src/components/Raw.tsx", "Broken Bytes")]
        assert report.exit_code == 1

    def test_source_scan_can_be_disabled(self, clean_project):
        clean_project.add_component("Toolbar.tsx", "<button>Submit Now</button>\n")

        report = verify(settings=clean_project.settings(), request=VerifyRequest(scan_sources=False))

        assert report.passed

    def test_missing_reference_is_fatal(self, project):
        project.add_locale("de")

        report = verify(settings=project.settings())

        assert report.exit_code == 2
        assert not report.passed
        assert "Reference locale 'en' not found" in report.fatal_error
        assert report.results[0].issues[0].kind is IssueKind.FATAL

    def test_restricted_locales(self, project):
        project.add_locale("en")
        project.add_locale("ja")

        report = verify(settings=project.settings(), request=VerifyRequest(target_locales=["ja"]))

        assert report.passed
        assert [s.locale for s in report.locale_stats] == ["ja"]

    def test_idempotent(self, clean_project):
        clean_project.write_namespace("fr", "errors", {"ok": "OK"})
        settings = clean_project.settings()

        first = verify(settings=settings).model_dump(exclude={"generated_at"})
        second = verify(settings=settings).model_dump(exclude={"generated_at"})

        assert first == second

    def test_locale_stats(self, clean_project):
        (clean_project.locales_dir / "de" / "errors.json").unlink()

        report = verify(settings=clean_project.settings())

        de = next(s for s in report.locale_stats if s.locale == "de")
        assert de.reference_keys == 40
        assert de.present_keys == 36
        assert de.coverage == 0.9

    def test_hooks_and_custom_checks(self, clean_project):
        started = []
        finished = []
        hooks = PipelineHooks(check_start=started.append, check_done=lambda r: finished.append(r.check_id))

        report = verify(settings=clean_project.settings(), checks=default_checks()[:2], hooks=hooks)

        assert started == [CheckId.STRUCTURE, CheckId.COMPLETENESS]
        assert finished == started
        assert len(report.results) == 2


class TestExporters:
    """Exportación JSON / HTML del mismo agregado"""

    def test_json_export(self, clean_project, tmp_path):
        report = verify(settings=clean_project.settings())

        path = export_report_json(report=report, output_path=tmp_path / "out" / "report.json")

        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload["passed"] is True
        assert payload["exit_code"] == 0
        assert [r["check_id"] for r in payload["results"]] == [c.value for c in CheckId]
        assert payload["results"][0]["name"] == "Structural Integrity"

    def test_html_export_lists_failing_issues(self, clean_project, tmp_path):
        clean_project.write_namespace(
            "fr", "common", {"ok": "OK", "actions": {"save": "[EN] Save", "quit": "Quit"}, "shortcuts": []}
        )
        report = verify(settings=clean_project.settings())

        path = export_report_html(report=report, output_path=tmp_path / "report.html")

        html = path.read_text(encoding="utf-8")
        assert "No [EN] Placeholders" in html
        assert "actions.save" in html
        assert "FAIL" in html

    def test_html_escapes_values(self, clean_project):
        clean_project.add_component("Evil.tsx", '<input placeholder="Click <b>here</b> now" />\n')
        report = verify(settings=clean_project.settings())

        html = render_report_html(report=report)

        assert "&lt;b&gt;here&lt;/b&gt;" in html
        assert "<b>here" not in html
