"""Expectancy scorer: expected R-multiple per trade."""
from __future__ import annotations

from grader.config import DEFAULT_WIN_RATE_PERCENT
from grader.models import ExpectancyLabel, ExpectancyResult
from grader.scorers.base import BaseScorer, to_fixed


def expectancy(rr: float, win_rate_percent: float) -> float:
    """Average win normalized to ``rr`` units, average loss to 1 unit."""
    win_frac = win_rate_percent / 100.0
    return win_frac * rr - (1.0 - win_frac) * 1.0


class ExpectancyScorer(BaseScorer):
    name = "Expectancy"

    POSITIVE_MIN = 0.2
    STRONG_MIN = 0.5

    def evaluate(self, rr: float, win_rate_percent: float | None = None) -> ExpectancyResult:
        # Applies its own default; does not depend on the win-rate scorer.
        win_rate = DEFAULT_WIN_RATE_PERCENT if win_rate_percent is None else win_rate_percent
        exp = expectancy(rr, win_rate)

        if exp < 0:
            score, label = 0, ExpectancyLabel.negative
            note = (
                f"Expectancy of {to_fixed(exp, 3)}R is negative. Running this strategy long-term "
                "guarantees losses regardless of execution quality."
            )
        elif exp < self.POSITIVE_MIN:
            score, label = 45, ExpectancyLabel.marginal
            note = (
                f"Expectancy of {to_fixed(exp, 3)}R per trade is marginal. "
                "Commissions and slippage could easily push this negative."
            )
        elif exp < self.STRONG_MIN:
            score, label = 72, ExpectancyLabel.positive
            note = f"Expectancy of {to_fixed(exp, 3)}R per trade is solid. Each trade has a positive expected value."
        else:
            score, label = 95, ExpectancyLabel.strong
            note = (
                f"Expectancy of {to_fixed(exp, 3)}R per trade is excellent. "
                "This strategy generates strong edge per trade taken."
            )

        return ExpectancyResult(
            expectancy=exp, win_rate_percent=win_rate,
            score=score, label=label, note=note,
        )
