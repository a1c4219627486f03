from __future__ import annotations
from typing import Dict, List, Sequence, Tuple
from ..schemas import DuplicateAnalysis, DuplicateInfo, Occurrence, RecipeRecord

def _ingredients_of(recipe: RecipeRecord) -> List[str]:
    # Sin lista de ingredientes -> cero apariciones (no es error)
    return recipe.get("ingredients") or []

def analyze(recipes: Sequence[RecipeRecord]) -> DuplicateAnalysis:
    """
    Inventario de solo lectura de todas las apariciones de cada ingrediente en el lote.
    Recorre recetas en orden de entrada y, dentro de cada una, ingredientes en orden.
    No modifica nada: sirve como dry run del desduplicado.
    """
    ledger: Dict[str, List[Occurrence]] = {}
    for recipe_index, recipe in enumerate(recipes):
        recipe_id = recipe.get("id")
        for ingredient in _ingredients_of(recipe):
            ledger.setdefault(ingredient, []).append(
                Occurrence(recipe_id=recipe_id, recipe_index=recipe_index)
            )

    duplicates: Dict[str, DuplicateInfo] = {}
    total_duplicates = 0
    for ingredient, occurrences in ledger.items():
        if len(occurrences) > 1:
            duplicates[ingredient] = DuplicateInfo(
                total_occurrences=len(occurrences),
                duplicate_count=len(occurrences) - 1,  # la primera se conserva
                first_occurrence=occurrences[0],
                all_occurrences=occurrences,
            )
            total_duplicates += len(occurrences) - 1

    return DuplicateAnalysis(
        total_unique_ingredients=len(ledger),
        duplicate_ingredients=duplicates,
        total_duplicates_found=total_duplicates,
        ingredients_with_duplicates=len(duplicates),
    )

def most_duplicated(analysis: DuplicateAnalysis, limit: int) -> List[Tuple[str, DuplicateInfo]]:
    """Ingredientes con más duplicados primero; en empate se respeta el orden de aparición."""
    ranked = sorted(analysis.duplicate_ingredients.items(), key=lambda kv: kv[1].duplicate_count, reverse=True)
    return ranked[:limit]
