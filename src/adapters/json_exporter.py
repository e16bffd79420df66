"""Exportación JSON del resultado de balances.

Por qué JSON:
- Misma forma que la respuesta del handler: se puede comparar con
  respuestas en vivo o pasar a otras herramientas.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ResultSet


def dumps_result(result: ResultSet) -> str:
    return json.dumps(result.to_payload(), ensure_ascii=False, indent=2)


def export_result_json(*, result: ResultSet, output_path: Path) -> Path:
    """Exporta `ResultSet` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_result(result) + "\n", encoding="utf-8")
    return output_path
