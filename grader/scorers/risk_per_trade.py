"""Risk Per Trade scorer."""
from grader.models import RiskPerTradeResult, RiskSeverity
from grader.scorers.base import BaseScorer, fmt_number


class RiskPerTradeScorer(BaseScorer):
    name = "Risk Per Trade"

    # (inclusive upper bound, score, severity, note); checked in order
    TIERS = (
        (
            1.0, 95, RiskSeverity.ok,
            "{risk}% risk per trade is conservative and professional. "
            "Account can sustain extended drawdowns without critical damage.",
        ),
        (
            2.0, 75, RiskSeverity.ok,
            "{risk}% risk per trade is within acceptable range. "
            "A 10-loss streak would draw your account down ~20%. Manageable.",
        ),
        (
            3.0, 50, RiskSeverity.warning,
            "{risk}% risk per trade is elevated. A 10-loss streak costs ~30% of account. "
            "Consider reducing to 2% or below.",
        ),
        (
            5.0, 20, RiskSeverity.warning,
            "{risk}% risk per trade is high. A 10-loss streak could destroy ~40% of your account. "
            "This will fail prop firm risk limits.",
        ),
    )
    CRITICAL_NOTE = (
        "{risk}% risk per trade is critical. A single bad week could wipe your account. "
        "This is gambling, not trading."
    )

    def evaluate(self, risk_percent: float) -> RiskPerTradeResult:
        score, severity, template = 0, RiskSeverity.critical, self.CRITICAL_NOTE
        for upper, tier_score, tier_severity, tier_note in self.TIERS:
            if risk_percent <= upper:
                score, severity, template = tier_score, tier_severity, tier_note
                break

        note = template.format(risk=fmt_number(risk_percent))
        return RiskPerTradeResult(risk_percent=risk_percent, score=score, severity=severity, note=note)
