"""Health check router."""
from __future__ import annotations

import logging
from collections.abc import Mapping

from fastapi import APIRouter, Depends

from backend.dependencies import get_asset_classes
from backend.schemas import HealthResponse
from grader.asset_classes import AssetClassInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(
    asset_classes: Mapping[str, AssetClassInfo] = Depends(get_asset_classes),
) -> HealthResponse:
    """Return system health status."""
    count = len(asset_classes)
    if count == 0:
        logger.warning("Health check: asset-class table is empty")

    return HealthResponse(
        status="ok" if count else "degraded",
        asset_classes=count,
    )
