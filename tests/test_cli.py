"""Tests for the strategy-grader command line."""
from __future__ import annotations

import json

import pytest
from structlog.testing import capture_logs

from grader import cli

SCENARIO_A = [
    "analyze", "--name", "London Breakout", "--asset-class", "forex",
    "--timeframe", "swing", "--stop", "1.5", "--target", "3",
    "--risk", "1", "--trades-per-week", "5",
]


@pytest.fixture(autouse=True)
def log_events(monkeypatch):
    """Keep global logging untouched and capture structlog events instead of printing them."""
    monkeypatch.setattr(cli, "configure_logging", lambda *a, **kw: None)
    with capture_logs() as events:
        yield events


def test_analyze_json(capsys):
    assert cli.main([*SCENARIO_A, "--json", "--session-id", "cli-1"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["finalScore"] == 90
    assert data["grade"] == "A"
    assert data["sessionId"] == "cli-1"
    assert data["winRateResult"]["isAssumed"] is True


def test_analyze_with_win_rate(capsys):
    assert cli.main([*SCENARIO_A, "--win-rate", "55", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["winRateResult"]["isAssumed"] is False
    assert data["input"]["winRatePercent"] == 55.0


def test_analyze_table_output(capsys):
    assert cli.main(SCENARIO_A) == 0
    out = capsys.readouterr().out
    assert "Strategy Report" in out
    assert "Sub-scores" in out


def test_asset_classes_command(capsys):
    assert cli.main(["asset-classes"]) == 0
    assert "crypto" in capsys.readouterr().out


@pytest.mark.parametrize("flag, value", [
    ("--stop", "0"),
    ("--stop", "51"),
    ("--target", "-1"),
    ("--risk", "101"),
    ("--trades-per-week", "201"),
    ("--win-rate", "0"),
    ("--win-rate", "99.5"),
    ("--stop", "abc"),
])
def test_out_of_range_values_rejected(flag, value):
    args = list(SCENARIO_A)
    if flag in args:
        args[args.index(flag) + 1] = value
    else:
        args += [flag, value]
    with pytest.raises(SystemExit) as exc:
        cli.main(args)
    assert exc.value.code == 2


def test_blank_name_rejected():
    args = list(SCENARIO_A)
    args[args.index("--name") + 1] = "   "
    with pytest.raises(SystemExit):
        cli.main(args)


def test_unknown_timeframe_rejected():
    args = list(SCENARIO_A)
    args[args.index("--timeframe") + 1] = "weekly"
    with pytest.raises(SystemExit):
        cli.main(args)


def test_analysis_is_logged(capsys, log_events):
    cli.main([*SCENARIO_A, "--json", "--session-id", "cli-2"])
    analyzed = [e for e in log_events if e["event"] == "strategy_analyzed"]
    assert analyzed[0]["grade"] == "A"
    assert analyzed[0]["session_id"] == "cli-2"


def test_unknown_asset_class_logs_warning(capsys, log_events):
    args = list(SCENARIO_A)
    args[args.index("--asset-class") + 1] = "lumber"
    assert cli.main([*args, "--json"]) == 0
    warnings = [e for e in log_events if e["event"] == "asset_class_unknown"]
    assert warnings[0]["asset_class"] == "lumber"
    assert warnings[0]["log_level"] == "warning"
    assert json.loads(capsys.readouterr().out)["volatilityResult"]["adrTypical"] == 2.0
