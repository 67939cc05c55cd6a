"""Exportación JSON de reportes.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Salida estable (claves ordenadas) para comparar ejecuciones.
"""

from __future__ import annotations

import json
from typing import Iterable

from core.domain.models import ShowcaseReport


def render_reports_json(reports: Iterable[ShowcaseReport]) -> str:
    """Serializa reportes a JSON UTF-8 con formato estable."""

    payload = [report.model_dump(mode="json") for report in reports]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
