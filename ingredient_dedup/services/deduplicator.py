from __future__ import annotations
from typing import Any, Dict, List, Sequence, Set, Tuple
from ..schemas import DedupResult, DedupStats, Occurrence, RecipeRecord

def deduplicate(recipes: Sequence[RecipeRecord]) -> DedupResult:
    """
    Elimina ingredientes duplicados en TODO el lote, no sólo dentro de cada receta.
    Se conserva la primera aparición según (índice de receta, posición en la receta)
    y se quitan todas las posteriores, anotando de qué receta salió cada una.
    Las recetas de entrada no se modifican: se devuelven copias con la lista filtrada.
    """
    seen: Set[str] = set()
    stats = DedupStats(total_recipes=len(recipes))
    cleaned: List[Dict[str, Any]] = []

    for recipe_index, recipe in enumerate(recipes):
        original = recipe.get("ingredients") or []
        kept: List[str] = []
        modified = False
        stats.total_ingredients_before += len(original)

        for ingredient in original:
            if ingredient not in seen:
                seen.add(ingredient)
                kept.append(ingredient)
                stats.unique_ingredients_kept += 1
            else:
                stats.total_ingredients_removed += 1
                modified = True
                stats.removed_ingredients.setdefault(ingredient, []).append(
                    Occurrence(recipe_id=recipe.get("id"), recipe_index=recipe_index)
                )

        stats.total_ingredients_after += len(kept)
        if modified:
            stats.recipes_modified += 1
        cleaned.append({**recipe, "ingredients": kept})

    return DedupResult(recipes=cleaned, stats=stats)

def most_removed(stats: DedupStats, limit: int) -> List[Tuple[str, List[Occurrence]]]:
    """Ingredientes eliminados de más recetas primero (orden estable en empates)."""
    ranked = sorted(stats.removed_ingredients.items(), key=lambda kv: len(kv[1]), reverse=True)
    return ranked[:limit]
