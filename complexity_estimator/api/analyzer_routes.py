# complexity_estimator/api/analyzer_routes.py
"""
analyzer_routes.py
==================

FastAPI router for the snippet complexity endpoints.
"""

import logging
from typing import Dict

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..domain.growth_curve import sample_growth
from ..schemas import (
    AnalysisResult,
    AnalyzeRequest,
    GrowthCurve,
    GrowthCurveRequest,
    SelfCheckReport,
)
from ..services import analyze, run_self_check


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="",
    tags=["complexity-analysis"],
    responses={
        404: {"description": "Resource not found"},
        500: {"description": "Internal server error"},
    },
)


@router.post("/analyze", response_model=AnalysisResult)
def analyze_snippet(req: AnalyzeRequest) -> AnalysisResult:
    """
    Estimates time and space complexity of a snippet.

    Empty, oversized or unparsable snippets are not HTTP errors: they come
    back with ``error`` set and constant complexities.
    """
    try:
        return analyze(req.code)
    except Exception as e:
        logger.exception("Unexpected failure while analyzing snippet")
        raise HTTPException(status_code=500, detail=f"Internal analysis error: {str(e)}")


@router.post("/growth-curve", response_model=GrowthCurve)
def growth_curve(req: GrowthCurveRequest) -> GrowthCurve:
    try:
        return sample_growth(req.label, req.sizes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/self-check", response_model=SelfCheckReport)
def self_check() -> SelfCheckReport:
    """Runs the built-in reference snippets through the engine."""
    return run_self_check()


@router.get("/health")
def health_check() -> Dict[str, str]:
    return {"status": "ok", "service": settings.APP_NAME}
