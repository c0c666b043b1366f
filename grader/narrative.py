"""Rule-based narrative: strengths, weaknesses and improvements.

Each rule is an independent ``(section, predicate, message)`` entry. Rules
are evaluated in table order and several may fire for the same result, so
the output lists are stable and directly assertable.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from grader.models import (
    ExpectancyLabel,
    ExpectancyResult,
    RiskPerTradeResult,
    RiskRewardLabel,
    RiskRewardResult,
    RiskSeverity,
    VolatilityLabel,
    VolatilityResult,
    WinRateResult,
)
from grader.scorers.base import to_fixed

FALLBACK_IMPROVEMENT = (
    "Strategy shows good structure. Focus on strict mechanical execution and journaling every trade."
)


class Section(str, Enum):
    strengths = "strengths"
    weaknesses = "weaknesses"
    improvements = "improvements"


@dataclass(frozen=True)
class NarrativeContext:
    """The five sub-score results a rule may inspect."""

    rr: RiskRewardResult
    win_rate: WinRateResult
    expectancy: ExpectancyResult
    risk: RiskPerTradeResult
    volatility: VolatilityResult


@dataclass(frozen=True)
class NarrativeRule:
    section: Section
    predicate: Callable[[NarrativeContext], bool]
    message: Callable[[NarrativeContext], str]

    def applies(self, ctx: NarrativeContext) -> bool:
        return self.predicate(ctx)


@dataclass(frozen=True)
class Narrative:
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    improvements: tuple[str, ...]


def _fixed(text: str) -> Callable[[NarrativeContext], str]:
    return lambda ctx: text


RULES: tuple[NarrativeRule, ...] = (
    # --- Strengths ---
    NarrativeRule(
        Section.strengths,
        lambda c: c.rr.label is RiskRewardLabel.strong,
        _fixed("Excellent risk-to-reward ratio. High R:R is the foundation of professional trading."),
    ),
    NarrativeRule(
        Section.strengths,
        lambda c: c.rr.label is RiskRewardLabel.acceptable,
        _fixed("Acceptable risk-to-reward ratio that gives a viable edge with consistent execution."),
    ),
    NarrativeRule(
        Section.strengths,
        lambda c: c.expectancy.label in (ExpectancyLabel.strong, ExpectancyLabel.positive),
        _fixed("Positive mathematical expectancy. This strategy has real statistical edge."),
    ),
    NarrativeRule(
        Section.strengths,
        lambda c: c.risk.severity is RiskSeverity.ok and c.risk.risk_percent <= 1,
        _fixed("Conservative position sizing. Your account is well-protected from drawdown sequences."),
    ),
    NarrativeRule(
        Section.strengths,
        lambda c: c.risk.severity is RiskSeverity.ok,
        _fixed("Risk per trade is within professional standards."),
    ),
    NarrativeRule(
        Section.strengths,
        lambda c: c.volatility.label is VolatilityLabel.acceptable,
        _fixed("Stop placement respects the natural volatility of your chosen market."),
    ),
    NarrativeRule(
        Section.strengths,
        lambda c: c.win_rate.buffer > 10,
        _fixed("Win rate provides a healthy buffer above the break-even threshold."),
    ),
    # --- Weaknesses ---
    NarrativeRule(
        Section.weaknesses,
        lambda c: c.rr.label is RiskRewardLabel.fail,
        _fixed("Risk-to-reward ratio is below 1:1. You cannot profit long-term from this setup."),
    ),
    NarrativeRule(
        Section.weaknesses,
        lambda c: c.rr.label is RiskRewardLabel.weak,
        _fixed("R:R ratio is too low to survive realistic drawdown periods."),
    ),
    NarrativeRule(
        Section.weaknesses,
        lambda c: c.expectancy.label is ExpectancyLabel.negative,
        _fixed("Negative expectancy means each trade loses money on average. No execution quality fixes this."),
    ),
    NarrativeRule(
        Section.weaknesses,
        lambda c: c.expectancy.label is ExpectancyLabel.marginal,
        _fixed("Marginal expectancy leaves no margin for commissions, slippage, or execution error."),
    ),
    NarrativeRule(
        Section.weaknesses,
        lambda c: c.risk.severity is RiskSeverity.warning,
        _fixed("Risk per trade is too high. Extended losing streaks will cause serious account damage."),
    ),
    NarrativeRule(
        Section.weaknesses,
        lambda c: c.risk.severity is RiskSeverity.critical,
        _fixed("Critical risk per trade. One bad week can wipe the account."),
    ),
    NarrativeRule(
        Section.weaknesses,
        lambda c: c.volatility.label is VolatilityLabel.too_tight,
        _fixed("Stop loss is too tight for the asset's natural daily movement. High false stop-out rate expected."),
    ),
    NarrativeRule(
        Section.weaknesses,
        lambda c: c.win_rate.provided_win_rate < c.win_rate.required_win_rate,
        _fixed("Win rate is below break-even. This strategy loses money over time."),
    ),
    # --- Improvements ---
    NarrativeRule(
        Section.improvements,
        lambda c: c.rr.rr < 2,
        lambda c: (
            f"Increase your target to achieve at least 2:1 R:R. Current R:R is {to_fixed(c.rr.rr, 2)}. "
            "Try widening target or tightening stop."
        ),
    ),
    NarrativeRule(
        Section.improvements,
        lambda c: c.risk.risk_percent > 2,
        _fixed(
            "Reduce risk per trade to 1-2%. The quality of a strategy means nothing "
            "if position sizing blows the account."
        ),
    ),
    NarrativeRule(
        Section.improvements,
        lambda c: c.volatility.label is VolatilityLabel.too_tight,
        lambda c: (
            f"Widen your stop to at least {to_fixed(c.volatility.adr_typical * 0.5, 1)}% "
            "to give trades room beyond normal daily noise."
        ),
    ),
    NarrativeRule(
        Section.improvements,
        lambda c: c.win_rate.is_assumed,
        _fixed("Track and record your actual win rate. The 45% assumption may not reflect your real edge."),
    ),
    NarrativeRule(
        Section.improvements,
        lambda c: c.expectancy.label in (ExpectancyLabel.negative, ExpectancyLabel.marginal),
        _fixed(
            "Reconsider entry criteria to improve your win rate, "
            "or improve your R:R to compensate for lower win rate."
        ),
    ),
)


def generate_narrative(
    ctx: NarrativeContext,
    rules: Sequence[NarrativeRule] = RULES,
) -> Narrative:
    """Evaluate *rules* in order against *ctx*.

    ``improvements`` is never empty: when no improvement rule fires the
    fallback encouragement is returned on its own.
    """
    sections: dict[Section, list[str]] = {s: [] for s in Section}
    for rule in rules:
        if rule.applies(ctx):
            sections[rule.section].append(rule.message(ctx))

    if not sections[Section.improvements]:
        sections[Section.improvements].append(FALLBACK_IMPROVEMENT)

    return Narrative(
        strengths=tuple(sections[Section.strengths]),
        weaknesses=tuple(sections[Section.weaknesses]),
        improvements=tuple(sections[Section.improvements]),
    )
