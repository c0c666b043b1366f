"""Tests for the ordered narrative rule table."""
from __future__ import annotations

from grader.narrative import (
    FALLBACK_IMPROVEMENT,
    RULES,
    NarrativeContext,
    NarrativeRule,
    Section,
    generate_narrative,
)
from grader.scorers.expectancy import ExpectancyScorer
from grader.scorers.risk_per_trade import RiskPerTradeScorer
from grader.scorers.risk_reward import RiskRewardScorer
from grader.scorers.volatility import VolatilityScorer
from grader.scorers.win_rate import WinRateScorer


def _context(stop=1.5, target=3.0, risk=1.0, win_rate=None, asset="forex") -> NarrativeContext:
    rr = RiskRewardScorer().evaluate(stop, target)
    return NarrativeContext(
        rr=rr,
        win_rate=WinRateScorer().evaluate(rr.rr, win_rate),
        expectancy=ExpectancyScorer().evaluate(rr.rr, win_rate),
        risk=RiskPerTradeScorer().evaluate(risk),
        volatility=VolatilityScorer().evaluate(stop, asset),
    )


def test_rule_table_has_twenty_rules():
    sections = [r.section for r in RULES]
    assert sections.count(Section.strengths) == 7
    assert sections.count(Section.weaknesses) == 8
    assert sections.count(Section.improvements) == 5


def test_rule_table_is_grouped_in_section_order():
    sections = [r.section for r in RULES]
    assert sections == sorted(sections, key=list(Section).index)


def test_weak_rr_with_warning_risk():
    n = generate_narrative(_context(stop=2.0, target=2.4, risk=2.5, win_rate=40.0, asset="stocks_large"))
    assert n.weaknesses == (
        "R:R ratio is too low to survive realistic drawdown periods.",
        "Negative expectancy means each trade loses money on average. No execution quality fixes this.",
        "Risk per trade is too high. Extended losing streaks will cause serious account damage.",
        "Win rate is below break-even. This strategy loses money over time.",
    )
    assert n.improvements == (
        "Increase your target to achieve at least 2:1 R:R. Current R:R is 1.20. "
        "Try widening target or tightening stop.",
        "Reduce risk per trade to 1-2%. The quality of a strategy means nothing "
        "if position sizing blows the account.",
        "Reconsider entry criteria to improve your win rate, "
        "or improve your R:R to compensate for lower win rate.",
    )


def test_tight_stop_suggests_half_adr():
    n = generate_narrative(_context(stop=0.4, target=1.2, win_rate=50.0, asset="forex"))
    assert (
        "Stop loss is too tight for the asset's natural daily movement. High false stop-out rate expected."
        in n.weaknesses
    )
    assert "Widen your stop to at least 0.5% to give trades room beyond normal daily noise." in n.improvements


def test_half_adr_tie_rounds_up():
    # crypto ADR 8.5 -> 4.25; a 4.2% stop would still be too tight
    n = generate_narrative(_context(stop=2.0, target=4.0, win_rate=50.0, asset="crypto"))
    assert "Widen your stop to at least 4.3% to give trades room beyond normal daily noise." in n.improvements
    assert VolatilityScorer().evaluate(4.2, "crypto").label.value == "Too Tight"


def test_current_rr_tie_rounds_up():
    n = generate_narrative(_context(stop=8.0, target=9.0))
    assert "Current R:R is 1.13." in n.improvements[0]


def test_acceptable_rr_and_marginal_expectancy():
    # rr 1.5 at 42% -> expectancy 0.05
    n = generate_narrative(_context(stop=1.0, target=1.5, win_rate=42.0))
    assert n.strengths[0] == (
        "Acceptable risk-to-reward ratio that gives a viable edge with consistent execution."
    )
    assert n.weaknesses[0] == (
        "Marginal expectancy leaves no margin for commissions, slippage, or execution error."
    )


def test_two_percent_risk_is_ok_but_not_conservative():
    n = generate_narrative(_context(risk=2.0))
    assert "Risk per trade is within professional standards." in n.strengths
    assert not any(s.startswith("Conservative position sizing") for s in n.strengths)
    assert not any(s.startswith("Reduce risk per trade") for s in n.improvements)


def test_fallback_when_nothing_to_improve():
    n = generate_narrative(_context(stop=1.0, target=3.0, win_rate=50.0))
    assert n.improvements == (FALLBACK_IMPROVEMENT,)


def test_fallback_with_empty_rule_set():
    n = generate_narrative(_context(), rules=())
    assert n.strengths == ()
    assert n.weaknesses == ()
    assert n.improvements == (FALLBACK_IMPROVEMENT,)


def test_custom_rules_evaluated_in_order():
    rules = (
        NarrativeRule(Section.strengths, lambda c: True, lambda c: "first"),
        NarrativeRule(Section.strengths, lambda c: False, lambda c: "skipped"),
        NarrativeRule(Section.strengths, lambda c: True, lambda c: f"rr={c.rr.rr:.1f}"),
        NarrativeRule(Section.improvements, lambda c: True, lambda c: "do better"),
    )
    n = generate_narrative(_context(), rules=rules)
    assert n.strengths == ("first", "rr=2.0")
    assert n.improvements == ("do better",)


def test_output_is_stable_across_calls():
    ctx = _context(stop=3.0, target=2.0, risk=4.0, asset="indices")
    assert generate_narrative(ctx) == generate_narrative(ctx)
