"""Pydantic v2 request and response models for the Strategy Grader API.

Wire field names are camelCase (``stopPercent``, ``rrResult``); Python
attributes stay snake_case. ``populate_by_name`` allows either on input.
"""
from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, field_validator
from pydantic.alias_generators import to_camel

from grader.config import (
    MAX_RISK_PER_TRADE_PERCENT,
    MAX_STOP_PERCENT,
    MAX_STRATEGY_NAME_LENGTH,
    MAX_TARGET_PERCENT,
    MAX_TRADES_PER_WEEK,
    WIN_RATE_BOUNDS,
)
from grader.models import (
    ExpectancyLabel,
    GradeLetter,
    RiskRewardLabel,
    RiskSeverity,
    StrategyInput,
    Timeframe,
    VolatilityLabel,
    WinRateLabel,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class AnalyzeRequest(CamelModel):
    """Body of ``POST /api/v1/analyze``.

    Numeric fields are strict: JSON numbers only, no numeric strings or booleans.
    """

    strategy_name: str = Field(min_length=1, max_length=MAX_STRATEGY_NAME_LENGTH)
    asset_class: str = Field(min_length=1)
    timeframe: Timeframe
    stop_percent: StrictFloat = Field(gt=0, le=MAX_STOP_PERCENT)
    target_percent: StrictFloat = Field(gt=0, le=MAX_TARGET_PERCENT)
    risk_per_trade_percent: StrictFloat = Field(gt=0, le=MAX_RISK_PER_TRADE_PERCENT)
    trades_per_week: StrictFloat = Field(gt=0, le=MAX_TRADES_PER_WEEK)
    win_rate_percent: StrictFloat | None = Field(default=None, ge=WIN_RATE_BOUNDS[0], le=WIN_RATE_BOUNDS[1])
    session_id: str | None = None

    @field_validator("session_id")
    @classmethod
    def _session_id_is_uuid(cls, v: str | None) -> str | None:
        # Echoed back verbatim, so validate without normalizing.
        if v is not None:
            try:
                uuid.UUID(v)
            except ValueError:
                raise ValueError("must be a valid UUID") from None
        return v

    def to_strategy_input(self) -> StrategyInput:
        return StrategyInput(
            strategy_name=self.strategy_name,
            asset_class=self.asset_class,
            timeframe=self.timeframe,
            stop_percent=self.stop_percent,
            target_percent=self.target_percent,
            risk_per_trade_percent=self.risk_per_trade_percent,
            trades_per_week=self.trades_per_week,
            win_rate_percent=self.win_rate_percent,
        )


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

class StrategyInputOut(CamelModel):
    strategy_name: str
    asset_class: str
    timeframe: Timeframe
    stop_percent: float
    target_percent: float
    risk_per_trade_percent: float
    trades_per_week: float
    win_rate_percent: float | None = None


class RiskRewardOut(CamelModel):
    rr: float
    score: int
    label: RiskRewardLabel
    note: str


class WinRateOut(CamelModel):
    required_win_rate: float
    provided_win_rate: float
    is_assumed: bool
    buffer: float
    score: int
    label: WinRateLabel
    note: str


class ExpectancyOut(CamelModel):
    expectancy: float
    win_rate_percent: float
    score: int
    label: ExpectancyLabel
    note: str


class RiskPerTradeOut(CamelModel):
    risk_percent: float
    score: int
    severity: RiskSeverity
    note: str


class VolatilityOut(CamelModel):
    stop_percent: float
    adr_typical: float
    ratio: float
    asset_label: str | None = None
    score: int
    label: VolatilityLabel
    note: str


class StrategyReportResponse(CamelModel):
    """Response envelope for the analyze endpoint."""

    input: StrategyInputOut
    rr_result: RiskRewardOut
    win_rate_result: WinRateOut
    expectancy_result: ExpectancyOut
    risk_per_trade_result: RiskPerTradeOut
    volatility_result: VolatilityOut
    expectancy_bucket: int
    final_score: int
    grade: GradeLetter
    strengths: list[str]
    weaknesses: list[str]
    improvements: list[str]
    analyzed_at: str
    session_id: str


# ---------------------------------------------------------------------------
# Reference data / health
# ---------------------------------------------------------------------------

class AssetClassOut(CamelModel):
    id: str
    label: str
    adr_min: float
    adr_max: float
    adr_typical: float


class AssetClassListResponse(CamelModel):
    asset_classes: list[AssetClassOut]


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    asset_classes: int


class ErrorResponse(BaseModel):
    error: str
    details: dict[str, list[str]] | None = None
