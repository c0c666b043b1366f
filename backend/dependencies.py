"""FastAPI dependency injection helpers."""
from __future__ import annotations

from collections.abc import Mapping

from fastapi import Request

from grader.asset_classes import AssetClassInfo
from grader.engine import StrategyGrader


def get_grader(request: Request) -> StrategyGrader:
    """Return the shared StrategyGrader from app state."""
    return request.app.state.grader


def get_asset_classes(request: Request) -> Mapping[str, AssetClassInfo]:
    """Return the asset-class reference table the grader scores against."""
    return request.app.state.grader.asset_classes
