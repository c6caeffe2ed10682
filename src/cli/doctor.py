"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings
from core.domain.locales import NAMESPACES, TARGET_LOCALES

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_dir(path: Path) -> tuple[bool, str]:
    if path.is_dir():
        return True, str(path)
    if path.exists():
        return False, f"{path} is not a directory"
    return False, f"{path} not found"


def _count_locales(locales_path: Path) -> tuple[bool, str]:
    if not locales_path.is_dir():
        return False, "locales directory missing"
    present = sorted(p.name for p in locales_path.iterdir() if p.is_dir())
    missing = [loc for loc in TARGET_LOCALES if loc not in present]
    if missing:
        return False, "missing: " + ", ".join(missing)
    return True, f"{len(TARGET_LOCALES)} target locale(s) present"


@app.command()
def run(
    root: Optional[Path] = typer.Option(None, "--root", help="Project root (default: current directory)."),
) -> None:
    """Check that the configured paths exist and show the build constants."""

    settings = AppSettings(project_root=root) if root is not None else AppSettings()

    table = Table(title="i18n-verify Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_root, detail_root = _check_dir(settings.project_root)
    table.add_row("Project root", "OK" if ok_root else "FAIL", detail_root)

    ok_locales, detail_locales = _check_dir(settings.locales_path)
    table.add_row("Locales dir", "OK" if ok_locales else "FAIL", detail_locales)

    ok_ref, detail_ref = _check_dir(settings.locales_path / settings.reference_locale)
    table.add_row(f"Reference locale ({settings.reference_locale})", "OK" if ok_ref else "FAIL", detail_ref)

    ok_targets, detail_targets = _count_locales(settings.locales_path)
    table.add_row("Target locales", "OK" if ok_targets else "WARN", detail_targets)

    # Optional: without components the coverage check simply has nothing to scan.
    ok_src, detail_src = _check_dir(settings.components_path)
    table.add_row("Components dir", "OK" if ok_src else "OPTIONAL", detail_src)

    table.add_row("Namespaces", "INFO", ", ".join(NAMESPACES))
    table.add_row("Issue display cap", "INFO", str(settings.max_issues_to_show))

    _console.print(table)

    if not ok_ref:
        _console.print(
            "\n[yellow]Note:[/yellow] Without the reference locale `verify` stops with a fatal structural issue."
        )
        raise typer.Exit(code=1)
