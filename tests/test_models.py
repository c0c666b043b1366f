"""Tests for report serialization and immutability."""
from __future__ import annotations

import dataclasses
import json

import pytest

from grader.engine import analyze_strategy
from tests.conftest import make_input


@pytest.fixture()
def report():
    return analyze_strategy(make_input(), session_id="fixed-session")


def test_to_dict_uses_camel_case_keys(report):
    data = report.to_dict()
    assert set(data) == {
        "input", "rrResult", "winRateResult", "expectancyResult", "riskPerTradeResult",
        "volatilityResult", "expectancyBucket", "finalScore", "grade", "strengths",
        "weaknesses", "improvements", "analyzedAt", "sessionId",
    }
    assert set(data["winRateResult"]) == {
        "requiredWinRate", "providedWinRate", "isAssumed", "buffer", "score", "label", "note",
    }
    assert data["input"]["stopPercent"] == 1.5
    assert data["input"]["winRatePercent"] is None


def test_to_dict_flattens_enums_and_tuples(report):
    data = report.to_dict()
    assert data["grade"] == "A"
    assert data["rrResult"]["label"] == "Strong"
    assert data["riskPerTradeResult"]["severity"] == "OK"
    assert data["input"]["timeframe"] == "swing"
    assert isinstance(data["improvements"], list)


def test_to_dict_is_json_serializable(report):
    decoded = json.loads(json.dumps(report.to_dict()))
    assert decoded["finalScore"] == 90
    assert decoded["sessionId"] == "fixed-session"


def test_report_is_frozen(report):
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.final_score = 100


def test_input_is_frozen():
    strategy = make_input()
    with pytest.raises(dataclasses.FrozenInstanceError):
        strategy.win_rate_percent = 50.0
