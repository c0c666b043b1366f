"""Asset-class reference data router."""
from __future__ import annotations

from collections.abc import Mapping

from fastapi import APIRouter, Depends

from backend.dependencies import get_asset_classes
from backend.schemas import AssetClassListResponse, AssetClassOut
from grader.asset_classes import AssetClassInfo

router = APIRouter(prefix="/api/v1", tags=["asset-classes"])


@router.get("/asset-classes", response_model=AssetClassListResponse)
def list_asset_classes(
    asset_classes: Mapping[str, AssetClassInfo] = Depends(get_asset_classes),
) -> AssetClassListResponse:
    """Return the asset classes the volatility-fit scorer knows about."""
    return AssetClassListResponse(
        asset_classes=[
            AssetClassOut(
                id=a.id, label=a.label,
                adr_min=a.adr_min, adr_max=a.adr_max, adr_typical=a.adr_typical,
            )
            for a in asset_classes.values()
        ]
    )
