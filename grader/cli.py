"""Command-line interface for the strategy grader.

    strategy-grader analyze --name "London breakout" --asset-class forex \\
        --timeframe intraday --stop 1.5 --target 3 --risk 1 --trades-per-week 5
    strategy-grader asset-classes

Input bounds are checked here, at parse time; the engine assumes valid input.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Callable

import structlog
from rich.console import Console
from structlog.types import Processor

from grader.asset_classes import ASSET_CLASSES
from grader.config import (
    MAX_RISK_PER_TRADE_PERCENT,
    MAX_STOP_PERCENT,
    MAX_STRATEGY_NAME_LENGTH,
    MAX_TARGET_PERCENT,
    MAX_TRADES_PER_WEEK,
    WIN_RATE_BOUNDS,
)
from grader.engine import StrategyGrader
from grader.models import StrategyInput, Timeframe
from grader.report_view import print_report, render_asset_classes_table


# ---------------------------------------------------------------------------
# Structured logging configuration
# ---------------------------------------------------------------------------


def configure_logging(level: int = logging.INFO, json_logs: bool | None = None) -> None:
    """Configure structlog with JSON or console rendering.

    *json_logs* picks the renderer; when None, LOG_FORMAT=json in the
    environment selects JSON lines and anything else the coloured console
    renderer. Output goes to stderr so ``--json`` reports on stdout
    stay machine-readable. Stdlib loggers share the same pipeline.
    """
    use_json = json_logs
    if use_json is None:
        use_json = os.environ.get("LOG_FORMAT", "").lower() == "json"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _bounded(low: float, high: float, low_inclusive: bool = False) -> Callable[[str], float]:
    """argparse type: float in (low, high], or [low, high] if *low_inclusive*."""

    def parse(raw: str) -> float:
        try:
            value = float(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{raw!r} is not a number") from None
        too_low = value < low if low_inclusive else value <= low
        if too_low or value > high:
            bracket = "[" if low_inclusive else "("
            raise argparse.ArgumentTypeError(f"{raw} must be in {bracket}{low:g}, {high:g}]")
        return value

    return parse


def _strategy_name(raw: str) -> str:
    name = raw.strip()
    if not name:
        raise argparse.ArgumentTypeError("strategy name is required")
    if len(name) > MAX_STRATEGY_NAME_LENGTH:
        raise argparse.ArgumentTypeError(f"strategy name exceeds {MAX_STRATEGY_NAME_LENGTH} characters")
    return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strategy-grader",
        description="Grade the structural soundness of a trading strategy.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Score a strategy and print the report")
    analyze.add_argument("--name", required=True, type=_strategy_name, help="Strategy name")
    analyze.add_argument("--asset-class", required=True, help="Asset class id, e.g. forex, crypto")
    analyze.add_argument(
        "--timeframe", required=True, choices=[t.value for t in Timeframe],
    )
    analyze.add_argument("--stop", required=True, type=_bounded(0, MAX_STOP_PERCENT), help="Stop distance %%")
    analyze.add_argument(
        "--target", required=True, type=_bounded(0, MAX_TARGET_PERCENT), help="Target distance %%",
    )
    analyze.add_argument(
        "--risk", required=True, type=_bounded(0, MAX_RISK_PER_TRADE_PERCENT),
        help="Account %% risked per trade",
    )
    analyze.add_argument("--trades-per-week", required=True, type=_bounded(0, MAX_TRADES_PER_WEEK))
    analyze.add_argument(
        "--win-rate", type=_bounded(*WIN_RATE_BOUNDS, low_inclusive=True), default=None,
        help="Historical win rate %% (omit if unknown; 45%% is assumed)",
    )
    analyze.add_argument("--session-id", default=None, help="Echoed back in the report")
    analyze.add_argument("--json", action="store_true", help="Print the report as JSON")

    sub.add_parser("asset-classes", help="List supported asset classes")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.WARNING)
    console = Console()

    if args.command == "asset-classes":
        console.print(render_asset_classes_table(ASSET_CLASSES))
        return 0

    strategy = StrategyInput(
        strategy_name=args.name,
        asset_class=args.asset_class,
        timeframe=Timeframe(args.timeframe),
        stop_percent=args.stop,
        target_percent=args.target,
        risk_per_trade_percent=args.risk,
        trades_per_week=args.trades_per_week,
        win_rate_percent=args.win_rate,
    )
    report = StrategyGrader().analyze(strategy, session_id=args.session_id)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(report, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
