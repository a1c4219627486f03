from typing import Any, Dict, List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Una receta es opaca para el núcleo: sólo se leen "id" e "ingredients".
RecipeRecord = Mapping[str, Any]

class CamelModel(BaseModel):
    """Serializa con las claves camelCase del formato de informe (recipeId, totalRecipes...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class Occurrence(CamelModel):
    recipe_id: Any = None
    recipe_index: int

# === Análisis (dry run) ===

class DuplicateInfo(CamelModel):
    total_occurrences: int
    duplicate_count: int
    first_occurrence: Occurrence
    all_occurrences: List[Occurrence]

class DuplicateAnalysis(CamelModel):
    total_unique_ingredients: int = 0
    duplicate_ingredients: Dict[str, DuplicateInfo] = Field(default_factory=dict)
    total_duplicates_found: int = 0
    ingredients_with_duplicates: int = 0

# === Desduplicado ===

class DedupStats(CamelModel):
    total_recipes: int = 0
    recipes_modified: int = 0
    total_ingredients_removed: int = 0
    total_ingredients_before: int = 0
    total_ingredients_after: int = 0
    unique_ingredients_kept: int = 0
    removed_ingredients: Dict[str, List[Occurrence]] = Field(default_factory=dict)

class DedupResult(CamelModel):
    recipes: List[Dict[str, Any]]
    stats: DedupStats

# === Informe de eliminaciones ===

class RemovalSummary(CamelModel):
    total_recipes: int
    recipes_modified: int
    total_ingredients_removed: int
    unique_ingredients_kept: int

class RemovalReport(CamelModel):
    timestamp: str
    summary: RemovalSummary
    removed_ingredients: Dict[str, List[Occurrence]]

class DedupRunResponse(CamelModel):
    recipes: List[Dict[str, Any]]
    stats: DedupStats
    report: Optional[RemovalReport] = None
