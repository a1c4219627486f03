from __future__ import annotations
import json
from pathlib import Path
from typing import Any, List, Mapping
from ..errors import RecipeFileError
from ..services.validation import validate_batch

def load_recipes(path: Path) -> List[Mapping]:
    """
    Lee un fichero JSON con un array de recetas y valida su forma.
    Lanza RecipeFileError si no se puede leer/parsear y RecipeBatchError si la forma no es válida.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeFileError(f"Cannot read {path}: {getattr(e, 'strerror', None) or e}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RecipeFileError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e
    return validate_batch(data)

def write_json(path: Path, data: Any, indent: int = 2) -> None:
    # Directorio como destino, sin permisos, disco lleno... -> RecipeFileError
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=indent), encoding="utf-8")
    except OSError as e:
        raise RecipeFileError(f"Cannot write {path}: {e.strerror or e}") from e

def default_output_path(input_path: Path, suffix: str) -> Path:
    # recipes.json -> recipes_global_deduplicated.json (mismo directorio)
    return input_path.with_name(f"{input_path.stem}{suffix}{input_path.suffix}")

def report_path_for(output_path: Path, suffix: str) -> Path:
    return output_path.with_name(f"{output_path.stem}{suffix}.json")
