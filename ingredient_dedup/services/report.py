from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any, Optional, Sequence
from ..schemas import DedupStats, RemovalReport, RemovalSummary

def _iso_utc(ts: datetime) -> str:
    # Mismo formato que toISOString(): milisegundos y sufijo Z
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def build_removal_report(stats: DedupStats, timestamp: Optional[datetime] = None) -> RemovalReport:
    ts = timestamp or datetime.now(timezone.utc)
    return RemovalReport(
        timestamp=_iso_utc(ts),
        summary=RemovalSummary(
            total_recipes=stats.total_recipes,
            recipes_modified=stats.recipes_modified,
            total_ingredients_removed=stats.total_ingredients_removed,
            unique_ingredients_kept=stats.unique_ingredients_kept,
        ),
        removed_ingredients=stats.removed_ingredients,
    )

def removal_percentage(stats: DedupStats) -> float:
    if not stats.total_ingredients_before:
        return 0.0
    return stats.total_ingredients_removed / stats.total_ingredients_before * 100

def serialized_size(records: Sequence[Any]) -> int:
    """Longitud del JSON compacto del lote (referencia para comparar tamaños)."""
    return len(json.dumps(list(records), ensure_ascii=False, separators=(",", ":")))

def size_reduction_percentage(original_size: int, new_size: int) -> float:
    if original_size <= 0:
        return 0.0
    return (original_size - new_size) / original_size * 100
