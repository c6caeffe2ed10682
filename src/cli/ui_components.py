"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El límite de issues mostrados es solo presentación: nunca altera el
  PASS/FAIL calculado por el pipeline.

Nota: los mensajes contienen corchetes (`[de]`, `[EN]`), así que se
imprimen siempre con `markup=False`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CheckResult, Issue, VerificationReport

RULE = "-" * 60
ISSUE_INDENT = "    "
DETAIL_INDENT = "      "


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (desactivable con --no-banner)."""

    title = Text("I18N-VERIFY", style="bold cyan")
    subtitle = Text("Structure • Completeness • Interpolation • Quality • Coverage", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def issue_lines(issue: Issue) -> list[str]:
    """Render one issue as its headline plus indented diagnostic lines."""

    lines = [issue.describe()]
    details = issue.details
    if "reference" in details:
        lines.append(f"{DETAIL_INDENT}REF: {details['reference']}")
    if "target" in details:
        label = (issue.locale or "value").upper()
        lines.append(f"{DETAIL_INDENT}{label}: {details['target']}")
    return lines


def render_issue_list(issues: list[Issue], limit: int) -> list[str]:
    """Lines for at most `limit` issues plus an overflow counter."""

    lines: list[str] = []
    for issue in issues[:limit]:
        head, *rest = issue_lines(issue)
        lines.append(ISSUE_INDENT + head)
        lines.extend(rest)
    if len(issues) > limit:
        lines.append(f"{ISSUE_INDENT}... and {len(issues) - limit} more ({len(issues)} total)")
    return lines


def print_check_section(console: Console, number: int, result: CheckResult, limit: int) -> None:
    console.print(f"CHECK {number}: {result.name}", style="bold", markup=False)
    console.print(RULE, style="dim", markup=False)
    if result.passed:
        console.print("  PASS", style="green", markup=False)
    else:
        count = len(result.issues)
        console.print(f"  FAIL - {count} issue{'s' if count != 1 else ''}:", style="red", markup=False)
        for line in render_issue_list(result.issues, limit):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
    console.print()


def build_summary_table(report: VerificationReport) -> Table:
    table = Table(title="i18n Verification Summary")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Issues", justify="right")
    for number, result in enumerate(report.results, start=1):
        status = Text("PASS", style="green") if result.passed else Text("FAIL", style="bold red")
        table.add_row(str(number), result.name, status, str(len(result.issues)))
    return table


def build_locale_stats_table(report: VerificationReport) -> Table:
    table = Table(title="Key coverage per locale")
    table.add_column("Locale", style="cyan", no_wrap=True)
    table.add_column("Present", justify="right")
    table.add_column("Reference", justify="right")
    table.add_column("Coverage", justify="right")
    for stats in report.locale_stats:
        style = "green" if stats.present_keys == stats.reference_keys else "yellow"
        table.add_row(
            stats.locale,
            str(stats.present_keys),
            str(stats.reference_keys),
            Text(f"{stats.coverage * 100:.1f}%", style=style),
        )
    return table


def print_report(
    console: Console,
    report: VerificationReport,
    *,
    limit: int,
    show_stats: bool = False,
) -> None:
    """Print every check section, the summary table and the overall line."""

    console.print("=== i18n Verification Report ===", style="bold", markup=False)
    console.print()

    if report.fatal_error:
        console.print(f"FATAL: {report.fatal_error}", style="bold red", markup=False, soft_wrap=True)
        console.print()

    for number, result in enumerate(report.results, start=1):
        print_check_section(console, number, result, limit)

    if show_stats and report.locale_stats:
        console.print(build_locale_stats_table(report))
        console.print()

    console.print(build_summary_table(report))
    console.print()
    overall = "PASS" if report.passed else "FAIL"
    console.print(f"OVERALL: {overall}", style="bold green" if report.passed else "bold red", markup=False)
