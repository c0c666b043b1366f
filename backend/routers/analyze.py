"""Analyze router: grade a self-reported trading strategy."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backend.dependencies import get_grader
from backend.schemas import AnalyzeRequest, ErrorResponse, StrategyReportResponse
from grader.engine import StrategyGrader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analyze"])


@router.post(
    "/analyze",
    response_model=StrategyReportResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze(
    body: AnalyzeRequest,
    grader: StrategyGrader = Depends(get_grader),
):
    """Score the strategy and return the full report."""
    try:
        report = grader.analyze(body.to_strategy_input(), session_id=body.session_id)
        return StrategyReportResponse.model_validate(report.to_dict())
    except Exception:
        logger.exception("Analysis failed for strategy %r", body.strategy_name)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
