"""Centralized scoring constants for the strategy grader.

Weights, grade bands and fallback values live here so every scorer and the
aggregator read the same numbers.
"""

# ---------------------------------------------------------------------------
# Aggregation weights
# ---------------------------------------------------------------------------

# Win-rate and expectancy scores are averaged into the "expectancy" bucket
# before weighting.
SCORE_WEIGHTS = {
    "rr": 0.30,
    "risk_per_trade": 0.25,
    "expectancy": 0.25,
    "volatility": 0.20,
}

# Lower bound (inclusive) -> grade letter, checked top-down
GRADE_BANDS = (
    (90, "A"),
    (75, "B"),
    (60, "C"),
    (40, "D"),
    (0, "F"),
)

MAX_SCORE = 100

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_WIN_RATE_PERCENT = 45.0   # conservative assumption when not reported
DEFAULT_ADR_TYPICAL = 2.0         # % daily range for unknown asset classes
UNKNOWN_ASSET_LABEL = "this asset class"

# ---------------------------------------------------------------------------
# Input ceilings (enforced by the API and CLI layers)
# ---------------------------------------------------------------------------

MAX_STRATEGY_NAME_LENGTH = 100
MAX_STOP_PERCENT = 50.0
MAX_TARGET_PERCENT = 100.0
MAX_RISK_PER_TRADE_PERCENT = 100.0
MAX_TRADES_PER_WEEK = 200.0
WIN_RATE_BOUNDS = (1.0, 99.0)
