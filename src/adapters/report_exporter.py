"""Exportación HTML del reporte.

Por qué está en adapters:
- El render HTML (Jinja2) es un detalle de infraestructura.
- El Core solo conoce el agregado `VerificationReport`.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import VerificationReport

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_report_html(*, report: VerificationReport) -> str:
    """Renderiza un HTML autocontenido para el reporte."""

    generated_at = report.generated_at.isoformat(timespec="seconds")
    generated_at_local = report.generated_at.astimezone().isoformat(timespec="seconds")

    failed = [r for r in report.results if not r.passed]
    issues_total = sum(len(r.issues) for r in report.results)

    template = _get_env().get_template("report.html")
    return template.render(
        report=report,
        generated_at=generated_at,
        generated_at_local=generated_at_local,
        failed_count=len(failed),
        issues_total=issues_total,
    )


def export_report_html(*, report: VerificationReport, output_path: Path) -> Path:
    """Exporta el reporte como HTML.

    Útil para adjuntarlo como artefacto de CI cuando la salida de consola se
    trunca.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_report_html(report=report)
    output_path.write_text(html, encoding="utf-8")
    return output_path
