"""Exportación JSON del reporte.

Por qué JSON:
- Permite archivar o comparar ejecuciones en pipelines (CI, cron).
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import CartCheckReport


def export_report_json(*, report: CartCheckReport, output_path: Path) -> Path:
    """Exporta `CartCheckReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
