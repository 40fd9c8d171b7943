"""Exportación JSON del resumen de sincronización.

Por qué JSON:
- Interoperabilidad con pipelines (CI que siembra un entorno de demo).
- Permite guardar el resultado de una ejecución sin depender de la consola.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import SyncReport


def export_report_json(*, report: SyncReport, output_path: Path) -> Path:
    """Exporta `SyncReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
