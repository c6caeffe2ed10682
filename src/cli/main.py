"""CLI principal (Typer).

Por qué Typer:
- Opciones tipadas y ayuda generada sin boilerplate.
- El comando solo presenta: toda la lógica vive en
  `core.services.verification_pipeline`.

Códigos de salida:
- 0: todos los checks pasan.
- 1: al menos un check falla.
- 2: ejecución abortada (p.ej. locale de referencia ausente).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html
from cli import doctor
from cli.ui_components import print_banner, print_report
from core.config import AppSettings
from core.domain.locales import TARGET_LOCALES
from core.logging_config import setup_logging
from core.services.verification_pipeline import VerifyRequest, verify as run_verification

app = typer.Typer(
    no_args_is_help=True,
    help="Static verification of multi-locale translation resources.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = logging.getLogger(__name__)


def _settings_from_options(
    *,
    root: Optional[Path],
    locales_dir: Optional[Path],
    components_dir: Optional[Path],
    reference: Optional[str],
    max_issues: Optional[int],
) -> AppSettings:
    overrides: dict[str, object] = {
        "project_root": root,
        "locales_dir": locales_dir,
        "components_dir": components_dir,
        "reference_locale": reference,
        "max_issues_to_show": max_issues,
    }
    return AppSettings(**{k: v for k, v in overrides.items() if v is not None})


@app.command()
def verify(
    root: Optional[Path] = typer.Option(None, "--root", help="Project root (default: current directory)."),
    locales_dir: Optional[Path] = typer.Option(None, "--locales-dir", help="Locales directory, relative to root."),
    components_dir: Optional[Path] = typer.Option(
        None, "--components-dir", help="Component sources directory, relative to root."
    ),
    reference: Optional[str] = typer.Option(None, "--reference", help="Reference locale (default: en)."),
    locales: Optional[List[str]] = typer.Option(
        None, "--locale", "-l", help="Restrict verification to these target locales (repeatable)."
    ),
    max_issues: Optional[int] = typer.Option(None, "--max-issues", min=1, help="Issues shown per check."),
    json_output: Optional[Path] = typer.Option(None, "--json-output", help="Write the full report as JSON."),
    html_output: Optional[Path] = typer.Option(None, "--html-output", help="Write the full report as HTML."),
    stats: bool = typer.Option(False, "--stats", help="Show per-locale key coverage."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Run every check and exit non-zero when any of them fails."""

    setup_logging(verbose)

    request = VerifyRequest()
    if locales:
        unknown = [loc for loc in locales if loc not in TARGET_LOCALES]
        if unknown:
            raise typer.BadParameter(
                f"unknown locale(s): {', '.join(unknown)} (known: {', '.join(TARGET_LOCALES)})",
                param_hint="--locale",
            )
        request.target_locales = [loc for loc in TARGET_LOCALES if loc in locales]

    settings = _settings_from_options(
        root=root,
        locales_dir=locales_dir,
        components_dir=components_dir,
        reference=reference,
        max_issues=max_issues,
    )

    if not no_banner:
        print_banner(_console)

    report = run_verification(settings=settings, request=request)
    print_report(_console, report, limit=settings.max_issues_to_show, show_stats=stats)

    if json_output:
        path = export_report_json(report=report, output_path=json_output)
        _console.print(f"[green]JSON report:[/green] {path}")
    if html_output:
        path = export_report_html(report=report, output_path=html_output)
        _console.print(f"[green]HTML report:[/green] {path}")

    logger.debug("Exit code %d", report.exit_code)
    raise typer.Exit(code=report.exit_code)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
