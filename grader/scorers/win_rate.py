"""Break-even Win Rate scorer."""
from __future__ import annotations

from grader.config import DEFAULT_WIN_RATE_PERCENT
from grader.models import WinRateLabel, WinRateResult
from grader.scorers.base import BaseScorer, fmt_number, to_fixed

ASSUMED_PREFIX = f"[Conservative {DEFAULT_WIN_RATE_PERCENT:g}% win rate assumed] "


def required_win_rate(rr: float) -> float:
    """Break-even win rate in percent: win * rr == loss * 1."""
    return 100.0 / (1.0 + rr)


class WinRateScorer(BaseScorer):
    name = "Win Rate"

    WELL_BELOW = -10.0
    HEALTHY_BUFFER = 10.0

    def evaluate(self, rr: float, win_rate_percent: float | None = None) -> WinRateResult:
        required = required_win_rate(rr)
        is_assumed = win_rate_percent is None
        provided = DEFAULT_WIN_RATE_PERCENT if is_assumed else win_rate_percent
        buffer = provided - required

        assumed_tag = f" (assumed {DEFAULT_WIN_RATE_PERCENT:g}%)" if is_assumed else ""
        shown = fmt_number(provided)

        if buffer < self.WELL_BELOW:
            score, label = 10, WinRateLabel.losing
            note = (
                f"Your win rate{assumed_tag} of {shown}% is well below the {to_fixed(required, 1)}% "
                "needed to break even. This strategy loses money over time."
            )
        elif buffer < 0:
            score, label = 30, WinRateLabel.below_break_even
            note = (
                f"Your win rate{assumed_tag} of {shown}% is below the {to_fixed(required, 1)}% "
                "break-even threshold. Marginal viability."
            )
        elif buffer < self.HEALTHY_BUFFER:
            score, label = 60, WinRateLabel.thin
            note = (
                f"Win rate of {shown}% is above break-even ({to_fixed(required, 1)}%) but the margin is thin. "
                "Small variance can push you negative."
            )
        else:
            score, label = 90, WinRateLabel.healthy
            note = (
                f"Win rate of {shown}% gives a healthy {to_fixed(buffer, 1)}% buffer above the "
                f"{to_fixed(required, 1)}% break-even rate. Good cushion."
            )

        if is_assumed:
            note = ASSUMED_PREFIX + note

        return WinRateResult(
            required_win_rate=required,
            provided_win_rate=provided,
            is_assumed=is_assumed,
            buffer=buffer,
            score=score,
            label=label,
            note=note,
        )
