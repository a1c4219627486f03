from typing import Any, List
from fastapi import APIRouter, Body, Query
from ..errors import ErrorResponse
from ..schemas import DuplicateAnalysis, DedupRunResponse
from ..services.analyzer import analyze
from ..services.deduplicator import deduplicate
from ..services.report import build_removal_report
from ..services.validation import validate_batch

router = APIRouter(prefix="/dedup", tags=["dedup"])

@router.post(
    "/analyze",
    response_model=DuplicateAnalysis,
    responses={422: {"model": ErrorResponse}},
    summary="Análisis de duplicados sin modificar el lote",
)
def analyze_batch(recipes: List[Any] = Body(...)):
    return analyze(validate_batch(recipes))

@router.post(
    "/run",
    response_model=DedupRunResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Desduplicado global de ingredientes",
)
def run_batch(
    recipes: List[Any] = Body(...),
    report: bool = Query(False, description="Incluir informe de eliminaciones"),
):
    result = deduplicate(validate_batch(recipes))
    out = DedupRunResponse(recipes=result.recipes, stats=result.stats)
    if report and result.stats.removed_ingredients:
        out.report = build_removal_report(result.stats)
    return out
