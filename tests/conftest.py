"""Shared pytest fixtures and builders for the grader test suite."""

from __future__ import annotations

import pytest

from grader.engine import StrategyGrader
from grader.models import StrategyInput, Timeframe


def make_input(**overrides) -> StrategyInput:
    """Return a StrategyInput with reasonable defaults.

    The defaults reproduce a 2:1 forex swing setup risking 1% with no
    reported win rate.
    """
    defaults = dict(
        strategy_name="London Breakout",
        asset_class="forex",
        timeframe=Timeframe.swing,
        stop_percent=1.5,
        target_percent=3.0,
        risk_per_trade_percent=1.0,
        trades_per_week=5,
        win_rate_percent=None,
    )
    defaults.update(overrides)
    return StrategyInput(**defaults)


@pytest.fixture()
def grader() -> StrategyGrader:
    """A grader backed by the built-in asset-class table."""
    return StrategyGrader()
