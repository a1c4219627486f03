from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import settings
from .errors import RecipeBatchError, RecipeFileError
from .services.analyzer import analyze, most_duplicated
from .services.deduplicator import deduplicate, most_removed
from .services.report import build_removal_report, removal_percentage, serialized_size, size_reduction_percentage
from .utils.json_io import default_output_path, load_recipes, report_path_for, write_json

logger = logging.getLogger("ingredient_dedup")

USAGE = """
Desduplicador global de ingredientes

Elimina TODOS los ingredientes repetidos en el conjunto completo de recetas.
Sólo se conserva la PRIMERA aparición de cada ingrediente.

Uso: ingredient-dedup <input.json> [output.json] [opciones]

Opciones:
  --preview         Muestra el análisis sin modificar ficheros
  --show-analysis   Muestra el análisis detallado de duplicados
  --show-removals   Muestra de qué recetas se quitará cada ingrediente

Ejemplos:
  ingredient-dedup recipes.json
  ingredient-dedup recipes.json --preview --show-analysis --show-removals
  ingredient-dedup recipes.json clean_recipes.json

Cómo funciona:
  1. Recorre las recetas en orden
  2. La primera vez que ve "salt" (receta A) lo conserva
  3. Cada vez que vuelve a ver "salt" (recetas B, C, D...) lo elimina
  4. Resultado: "salt" aparece una única vez en todo el conjunto

AVISO: modifica mucho las recetas; ingredientes comunes como "salt" o "pepper"
quedarán en una sola receta.
"""

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ingredient-dedup", description="Desduplicado global de ingredientes (JSON)")
    ap.add_argument("input", type=Path, help="Fichero JSON con un array de recetas")
    ap.add_argument("output", type=Path, nargs="?", default=None, help="Fichero de salida (opcional)")
    ap.add_argument("--preview", action="store_true", help="Sólo análisis, no escribe ficheros")
    ap.add_argument("--show-analysis", action="store_true", help="Mostrar análisis de duplicados")
    ap.add_argument("--show-removals", action="store_true", help="Mostrar recetas afectadas por ingrediente")
    return ap

def print_analysis(recipes, show_removals: bool) -> None:
    analysis = analyze(recipes)
    print("\nANÁLISIS GLOBAL DE DUPLICADOS:")
    print("==============================")
    print(f"Ingredientes únicos: {analysis.total_unique_ingredients}")
    print(f"Ingredientes con duplicados: {analysis.ingredients_with_duplicates}")
    print(f"Apariciones duplicadas a eliminar: {analysis.total_duplicates_found}")

    if not analysis.duplicate_ingredients:
        return
    print("\nIngredientes más duplicados:")
    ranked = most_duplicated(analysis, settings.top_duplicates)
    for ingredient, info in ranked:
        print(f'  "{ingredient}": {info.duplicate_count} duplicados (apariciones totales: {info.total_occurrences})')
        print(f"    Primera aparición: receta {info.first_occurrence.recipe_id}")

    if show_removals:
        print("\nDetalle de eliminaciones previstas:")
        for ingredient, info in ranked[:settings.top_removal_preview]:
            print(f'\n  "{ingredient}" se eliminará de:')
            for occ in info.all_occurrences[1:]:
                print(f"    - receta {occ.recipe_id}")

def run(input_path: Path, output_path: Optional[Path] = None, preview: bool = False,
        show_analysis: bool = False, show_removals: bool = False) -> Optional[Path]:
    """
    Lee, (opcionalmente) analiza, desduplica y escribe resultados.
    Devuelve la ruta de salida o None en modo preview.
    """
    print(f"Leyendo recetas de: {input_path}")
    recipes = load_recipes(input_path)
    print(f"Procesando {len(recipes)} recetas para desduplicado global...")

    if show_analysis or preview:
        print_analysis(recipes, show_removals)

    if preview:
        print("\nMODO PREVIEW - no se modifica ningún fichero")
        return None

    print("Eliminando ingredientes duplicados globalmente...")
    result = deduplicate(recipes)
    stats = result.stats
    cleaned = result.recipes

    output_path = output_path or default_output_path(input_path, settings.output_suffix)
    write_json(output_path, cleaned, indent=settings.json_indent)
    logger.debug("Escritas %d recetas en %s", len(cleaned), output_path)

    print("\nDESDUPLICADO GLOBAL COMPLETADO")
    print("==============================")
    print(f"Salida guardada en: {output_path}")
    print(f"Recetas totales: {stats.total_recipes}")
    print(f"Recetas modificadas: {stats.recipes_modified}")
    print(f"Ingredientes eliminados: {stats.total_ingredients_removed}")
    print(f"Ingredientes únicos conservados: {stats.unique_ingredients_kept}")
    print(f"Ingredientes: {stats.total_ingredients_before} → {stats.total_ingredients_after}")
    print(f"Reducción: {removal_percentage(stats):.1f}% de los ingredientes eliminados")

    if stats.removed_ingredients:
        print("\nIngredientes eliminados con más frecuencia:")
        for ingredient, removals in most_removed(stats, settings.top_removed):
            print(f'  "{ingredient}": eliminado de {len(removals)} recetas')

    original_size = serialized_size(recipes)
    new_size = serialized_size(cleaned)
    if new_size < original_size:
        print(f"Tamaño reducido un {size_reduction_percentage(original_size, new_size):.1f}%")

    if stats.removed_ingredients:
        report_path = report_path_for(output_path, settings.report_suffix)
        report = build_removal_report(stats)
        write_json(report_path, report.model_dump(by_alias=True), indent=settings.json_indent)
        print(f"Informe de eliminaciones guardado en: {report_path}")

    return output_path

def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if not argv:
        print(USAGE)
        return 1
    args = build_parser().parse_args(argv)
    try:
        run(args.input, args.output, preview=args.preview,
            show_analysis=args.show_analysis, show_removals=args.show_removals)
    except (RecipeFileError, RecipeBatchError) as e:
        logger.error("Error procesando recetas: %s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
