"""Tests for the rich report rendering."""
from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from grader.asset_classes import ASSET_CLASSES
from grader.engine import analyze_strategy
from grader.report_view import (
    print_report,
    render_asset_classes_table,
    render_header,
    render_narrative_table,
    render_scores_table,
)
from grader.scorers.expectancy import ExpectancyScorer
from grader.scorers.risk_per_trade import RiskPerTradeScorer
from grader.scorers.risk_reward import RiskRewardScorer
from grader.scorers.volatility import VolatilityScorer
from grader.scorers.win_rate import WinRateScorer
from tests.conftest import make_input


def _report():
    return analyze_strategy(make_input(), session_id="view-session")


class TestRenderScoresTable:
    def test_returns_table(self):
        assert isinstance(render_scores_table(_report()), Table)

    def test_columns(self):
        headers = [col.header for col in render_scores_table(_report()).columns]
        assert headers == ["Dimension", "Metric", "Score", "Label", "Note"]

    def test_one_row_per_sub_score(self):
        assert render_scores_table(_report()).row_count == 5

    def test_dimension_names_come_from_scorers(self):
        names = list(render_scores_table(_report()).columns[0].cells)
        assert names == [
            RiskRewardScorer.name,
            WinRateScorer.name,
            ExpectancyScorer.name,
            RiskPerTradeScorer.name,
            VolatilityScorer.name,
        ]

    def test_metric_column_rounds_ties_up(self):
        report = analyze_strategy(make_input(stop_percent=8.0, target_percent=9.0))
        metrics = list(render_scores_table(report).columns[1].cells)
        assert metrics[0] == "1.13R"


class TestRenderNarrativeTable:
    def test_row_per_statement(self):
        report = _report()
        table = render_narrative_table(report)
        expected = len(report.strengths) + len(report.weaknesses) + len(report.improvements)
        assert table.row_count == expected

    def test_title(self):
        assert render_narrative_table(_report()).title == "Feedback"


def test_header_panel():
    panel = render_header(_report())
    assert isinstance(panel, Panel)
    assert panel.subtitle == "view-session"
    assert "Grade:" in panel.renderable


def test_asset_classes_table():
    table = render_asset_classes_table(ASSET_CLASSES)
    assert table.row_count == len(ASSET_CLASSES)


def test_print_report_smoke():
    console = Console(record=True, width=160)
    print_report(_report(), console)
    text = console.export_text()
    assert "London Breakout" in text
    assert "Risk-to-Reward" in text
    assert "90/100" in text
