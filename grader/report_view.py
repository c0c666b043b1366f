"""Terminal rendering of a ``StrategyReport`` using rich."""

from __future__ import annotations

from collections.abc import Iterable

import rich.box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from grader.asset_classes import AssetClassInfo
from grader.models import StrategyReport
from grader.scorers.base import fmt_number, to_fixed
from grader.scorers.expectancy import ExpectancyScorer
from grader.scorers.risk_per_trade import RiskPerTradeScorer
from grader.scorers.risk_reward import RiskRewardScorer
from grader.scorers.volatility import VolatilityScorer
from grader.scorers.win_rate import WinRateScorer

# Grade -> Rich color
_GRADE_STYLES: dict[str, str] = {
    "A": "bold green",
    "B": "green",
    "C": "yellow",
    "D": "#FF8C00",  # dark orange
    "F": "bold red",
}


def _score_style(score: int) -> str:
    """Return Rich color tag for a 0-100 sub-score."""
    if score >= 75:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def render_header(report: StrategyReport) -> Panel:
    """Panel with strategy name, grade and final score."""
    grade = report.grade.value
    style = _GRADE_STYLES.get(grade, "bold")
    inp = report.input
    line = "  │  ".join([
        f"[bold]{inp.strategy_name}[/]",
        f"Grade: [{style}]{grade}[/]",
        f"Score: [{_score_style(report.final_score)}]{report.final_score}/100[/]",
        f"{inp.asset_class} / {inp.timeframe.value}",
    ])
    return Panel(line, title="Strategy Report", subtitle=report.session_id, border_style="blue")


def render_scores_table(report: StrategyReport) -> Table:
    """Build a table of the five sub-scores.

    Columns: Dimension, Metric, Score, Label, Note
    """
    table = Table(title="Sub-scores", box=rich.box.SIMPLE_HEAVY, show_edge=False)
    table.add_column("Dimension", style="bold")
    table.add_column("Metric", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Label")
    table.add_column("Note", overflow="fold")

    wr = report.win_rate_result
    exp = report.expectancy_result
    risk = report.risk_per_trade_result
    vol = report.volatility_result
    rows = [
        (RiskRewardScorer.name, f"{to_fixed(report.rr_result.rr, 2)}R", report.rr_result.score,
         report.rr_result.label.value, report.rr_result.note),
        (WinRateScorer.name, f"{fmt_number(wr.provided_win_rate)}% vs {to_fixed(wr.required_win_rate, 1)}%",
         wr.score, wr.label.value + (" (assumed)" if wr.is_assumed else ""), wr.note),
        (ExpectancyScorer.name, f"{'+' if exp.expectancy >= 0 else ''}{to_fixed(exp.expectancy, 3)}R",
         exp.score, exp.label.value, exp.note),
        (RiskPerTradeScorer.name, f"{fmt_number(risk.risk_percent)}%", risk.score,
         risk.severity.value, risk.note),
        (VolatilityScorer.name, f"{to_fixed(vol.ratio, 2)}x ADR", vol.score,
         vol.label.value, vol.note),
    ]
    for name, metric, score, label, note in rows:
        color = _score_style(score)
        table.add_row(name, metric, f"[{color}]{score}[/]", label, note)

    return table


def render_narrative_table(report: StrategyReport) -> Table:
    """Strengths, weaknesses and improvements as one bulleted table."""
    table = Table(title="Feedback", box=rich.box.SIMPLE, show_edge=False, show_header=False)
    table.add_column("Section", style="bold", no_wrap=True)
    table.add_column("Statement", overflow="fold")

    sections = [
        ("[green]Strength[/]", report.strengths),
        ("[red]Weakness[/]", report.weaknesses),
        ("[cyan]Improve[/]", report.improvements),
    ]
    for heading, items in sections:
        for item in items:
            table.add_row(heading, f"• {item}")

    return table


def render_asset_classes_table(asset_classes: Iterable[AssetClassInfo]) -> Table:
    """Reference table of supported asset classes."""
    table = Table(title="Asset Classes", box=rich.box.SIMPLE_HEAVY, show_edge=False)
    table.add_column("ID", style="bold")
    table.add_column("Label")
    table.add_column("ADR Range", justify="right")
    table.add_column("Typical", justify="right")
    for a in asset_classes:
        table.add_row(a.id, a.label, f"{a.adr_min:g}-{a.adr_max:g}%", f"{a.adr_typical:g}%")
    return table


def print_report(report: StrategyReport, console: Console | None = None) -> None:
    """Print the full report to the console."""
    console = console or Console()
    console.print(Group(
        render_header(report),
        render_scores_table(report),
        render_narrative_table(report),
    ))
