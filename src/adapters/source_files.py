"""Descubrimiento de ficheros fuente de componentes UI.

El orden es determinista (ordenado por ruta) para que dos ejecuciones sobre el
mismo árbol produzcan el mismo reporte.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from core.interfaces.check import SourceFile

logger = logging.getLogger(__name__)


def find_source_files(root: Path, *, extension: str = ".tsx", test_suffix: str = ".test.tsx") -> list[Path]:
    """Return component files under `root`, excluding test files."""

    if not root.is_dir():
        logger.debug("Source directory not found: %s", root)
        return []
    return sorted(
        path
        for path in root.rglob(f"*{extension}")
        if path.is_file() and not path.name.endswith(test_suffix)
    )


def display_path(path: Path, base: Path) -> str:
    """Path relative to `base` with forward slashes (absolute when outside)."""

    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def iter_sources(
    root: Path,
    *,
    base: Path,
    extension: str = ".tsx",
    test_suffix: str = ".test.tsx",
) -> Iterator[SourceFile]:
    """Yield a `SourceFile` (display path + text) for each component file."""

    for path in find_source_files(root, extension=extension, test_suffix=test_suffix):
        try:
            # Undecodable bytes become U+FFFD; the rest of the file is still scanned.
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Skipping unreadable source %s: %s", path, exc)
            continue
        yield SourceFile(path=display_path(path, base), text=text)
