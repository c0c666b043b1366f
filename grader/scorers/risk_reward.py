"""Risk-to-Reward scorer."""
from grader.models import RiskRewardLabel, RiskRewardResult
from grader.scorers.base import BaseScorer, to_fixed


class RiskRewardScorer(BaseScorer):
    name = "Risk-to-Reward"

    WEAK_MIN = 1.0
    ACCEPTABLE_MIN = 1.5
    STRONG_MIN = 2.0

    def evaluate(self, stop_percent: float, target_percent: float) -> RiskRewardResult:
        rr = target_percent / stop_percent

        if rr < self.WEAK_MIN:
            score, label = 0, RiskRewardLabel.fail
            note = (
                f"Your R:R of {to_fixed(rr, 2)} means you risk more than you stand to gain. "
                "Every losing trade costs more than every winning trade earns."
            )
        elif rr < self.ACCEPTABLE_MIN:
            score, label = 35, RiskRewardLabel.weak
            note = (
                f"R:R of {to_fixed(rr, 2)} is technically positive but leaves little room for error. "
                "You need a high win rate to stay profitable."
            )
        elif rr < self.STRONG_MIN:
            score, label = 68, RiskRewardLabel.acceptable
            note = f"R:R of {to_fixed(rr, 2)} is workable. You can be profitable with a moderate win rate (~40%+)."
        else:
            score, label = 95, RiskRewardLabel.strong
            note = (
                f"R:R of {to_fixed(rr, 2)} is strong. "
                "Even a win rate below 40% can produce consistent profits at this ratio."
            )

        return RiskRewardResult(rr=rr, score=score, label=label, note=note)
