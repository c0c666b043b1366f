"""Core data structures for strategy grading.

Everything here is immutable: a ``StrategyInput`` goes in, five sub-score
records and a ``StrategyReport`` come out. ``StrategyReport.to_dict`` gives
the camelCase wire format consumed by the API and any presentation layer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Timeframe(str, Enum):
    scalp = "scalp"
    intraday = "intraday"
    swing = "swing"
    position = "position"


class GradeLetter(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class RiskRewardLabel(str, Enum):
    fail = "Fail"
    weak = "Weak"
    acceptable = "Acceptable"
    strong = "Strong"


class WinRateLabel(str, Enum):
    losing = "Losing"
    below_break_even = "Below Break-even"
    thin = "Thin"
    healthy = "Healthy"


class ExpectancyLabel(str, Enum):
    negative = "Negative"
    marginal = "Marginal"
    positive = "Positive"
    strong = "Strong"


class RiskSeverity(str, Enum):
    ok = "OK"
    warning = "Warning"
    critical = "Critical"


class VolatilityLabel(str, Enum):
    too_tight = "Too Tight"
    acceptable = "Acceptable"
    wide = "Wide"


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StrategyInput:
    """A self-reported strategy, already validated by the caller.

    ``win_rate_percent`` is ``None`` when the trader does not know it; a
    reported value is never confused with "unknown".
    """

    strategy_name: str
    asset_class: str
    timeframe: Timeframe
    stop_percent: float
    target_percent: float
    risk_per_trade_percent: float
    trades_per_week: float
    win_rate_percent: float | None = None


# ---------------------------------------------------------------------------
# Sub-score results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RiskRewardResult:
    rr: float
    score: int  # 0-100
    label: RiskRewardLabel
    note: str


@dataclass(frozen=True)
class WinRateResult:
    required_win_rate: float  # % needed to break even
    provided_win_rate: float  # reported, or the assumed default
    is_assumed: bool
    buffer: float  # provided - required, may be negative
    score: int
    label: WinRateLabel
    note: str


@dataclass(frozen=True)
class ExpectancyResult:
    expectancy: float  # R-multiples per trade
    win_rate_percent: float
    score: int
    label: ExpectancyLabel
    note: str


@dataclass(frozen=True)
class RiskPerTradeResult:
    risk_percent: float
    score: int
    severity: RiskSeverity
    note: str


@dataclass(frozen=True)
class VolatilityResult:
    stop_percent: float
    adr_typical: float
    ratio: float  # stop / adr_typical
    asset_label: str | None  # None when the asset class is not in the table
    score: int
    label: VolatilityLabel
    note: str


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {_to_camel(k): _camelize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_camelize(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(frozen=True)
class StrategyReport:
    """Full grading outcome for one ``StrategyInput``."""

    input: StrategyInput
    rr_result: RiskRewardResult
    win_rate_result: WinRateResult
    expectancy_result: ExpectancyResult
    risk_per_trade_result: RiskPerTradeResult
    volatility_result: VolatilityResult
    expectancy_bucket: int
    final_score: int
    grade: GradeLetter
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    improvements: tuple[str, ...]
    analyzed_at: str  # ISO-8601, UTC
    session_id: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict with camelCase keys."""
        return _camelize(asdict(self))
