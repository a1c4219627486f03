from __future__ import annotations
from collections.abc import Mapping
from typing import Any, List
from ..errors import RecipeBatchError

def validate_batch(data: Any) -> List[Mapping]:
    """
    Comprueba que el lote parseado es una lista de recetas antes de procesarlo.
    - la raíz debe ser una lista (o tupla)
    - cada entrada debe ser un objeto
    - "ingredients", si existe y no es null, debe ser una lista de strings
    No se intenta recuperar nada: el primer fallo lanza RecipeBatchError.
    """
    if not isinstance(data, (list, tuple)):
        raise RecipeBatchError("JSON file must contain an array of recipes")
    for i, recipe in enumerate(data):
        if not isinstance(recipe, Mapping):
            raise RecipeBatchError(f"Recipe at index {i} is not an object", index=i)
        ingredients = recipe.get("ingredients")
        if ingredients is None:
            continue
        if not isinstance(ingredients, list):
            raise RecipeBatchError(f"Recipe at index {i} has a non-list 'ingredients' field", index=i)
        for ing in ingredients:
            if not isinstance(ing, str):
                raise RecipeBatchError(f"Recipe at index {i} has a non-string ingredient: {ing!r}", index=i)
    return list(data)
