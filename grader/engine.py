"""Grading engine: runs the five scorers and aggregates them into a report."""
from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import datetime, timezone

import structlog

from grader.asset_classes import ASSET_CLASS_MAP, AssetClassInfo
from grader.config import GRADE_BANDS, MAX_SCORE, SCORE_WEIGHTS
from grader.models import GradeLetter, StrategyInput, StrategyReport
from grader.narrative import NarrativeContext, generate_narrative
from grader.scorers.base import round_half_up
from grader.scorers.expectancy import ExpectancyScorer
from grader.scorers.risk_per_trade import RiskPerTradeScorer
from grader.scorers.risk_reward import RiskRewardScorer
from grader.scorers.volatility import VolatilityScorer
from grader.scorers.win_rate import WinRateScorer

log = structlog.get_logger()


def compute_grade(final_score: int) -> GradeLetter:
    """Map a 0-100 score to a letter; each band includes its lower bound."""
    for lower, letter in GRADE_BANDS:
        if final_score >= lower:
            return GradeLetter(letter)
    return GradeLetter.F


def expectancy_bucket(win_rate_score: int, expectancy_score: int) -> int:
    """Average the two scores that both derive from R:R and win rate."""
    return round_half_up((win_rate_score + expectancy_score) / 2)


def weighted_score(rr_score: int, risk_score: int, bucket: int, volatility_score: int) -> int:
    total = (
        rr_score * SCORE_WEIGHTS["rr"]
        + risk_score * SCORE_WEIGHTS["risk_per_trade"]
        + bucket * SCORE_WEIGHTS["expectancy"]
        + volatility_score * SCORE_WEIGHTS["volatility"]
    )
    return min(MAX_SCORE, round_half_up(total))


class StrategyGrader:
    """Scores a ``StrategyInput`` and builds the ``StrategyReport``.

    Holds no per-call state; one instance may serve concurrent callers.
    """

    def __init__(self, asset_classes: Mapping[str, AssetClassInfo] | None = None):
        self.asset_classes = ASSET_CLASS_MAP if asset_classes is None else asset_classes
        self.rr_scorer = RiskRewardScorer()
        self.win_rate_scorer = WinRateScorer()
        self.expectancy_scorer = ExpectancyScorer()
        self.risk_scorer = RiskPerTradeScorer()
        self.volatility_scorer = VolatilityScorer()

    def analyze(self, strategy: StrategyInput, session_id: str | None = None) -> StrategyReport:
        rr_result = self.rr_scorer.evaluate(strategy.stop_percent, strategy.target_percent)
        win_rate_result = self.win_rate_scorer.evaluate(rr_result.rr, strategy.win_rate_percent)
        expectancy_result = self.expectancy_scorer.evaluate(rr_result.rr, strategy.win_rate_percent)
        risk_result = self.risk_scorer.evaluate(strategy.risk_per_trade_percent)
        volatility_result = self.volatility_scorer.evaluate(
            strategy.stop_percent, strategy.asset_class, self.asset_classes,
        )

        bucket = expectancy_bucket(win_rate_result.score, expectancy_result.score)
        final_score = weighted_score(rr_result.score, risk_result.score, bucket, volatility_result.score)
        grade = compute_grade(final_score)

        narrative = generate_narrative(NarrativeContext(
            rr=rr_result,
            win_rate=win_rate_result,
            expectancy=expectancy_result,
            risk=risk_result,
            volatility=volatility_result,
        ))

        report = StrategyReport(
            input=strategy,
            rr_result=rr_result,
            win_rate_result=win_rate_result,
            expectancy_result=expectancy_result,
            risk_per_trade_result=risk_result,
            volatility_result=volatility_result,
            expectancy_bucket=bucket,
            final_score=final_score,
            grade=grade,
            strengths=narrative.strengths,
            weaknesses=narrative.weaknesses,
            improvements=narrative.improvements,
            analyzed_at=datetime.now(timezone.utc).isoformat(),
            session_id=session_id if session_id is not None else str(uuid.uuid4()),
        )

        log.info(
            "strategy_analyzed",
            strategy_name=strategy.strategy_name,
            asset_class=strategy.asset_class,
            final_score=final_score,
            grade=grade.value,
            session_id=report.session_id,
        )
        return report


def analyze_strategy(
    strategy: StrategyInput,
    session_id: str | None = None,
    asset_classes: Mapping[str, AssetClassInfo] | None = None,
) -> StrategyReport:
    """Convenience wrapper around ``StrategyGrader.analyze``."""
    return StrategyGrader(asset_classes).analyze(strategy, session_id)
