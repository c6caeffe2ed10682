"""Exportación JSON del reporte.

Por qué JSON:
- Interoperabilidad con otras herramientas de CI (anotaciones, dashboards).
- Incluye todos los issues, sin el límite de presentación de la consola.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import VerificationReport


def export_report_json(*, report: VerificationReport, output_path: Path) -> Path:
    """Exporta `VerificationReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
