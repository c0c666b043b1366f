"""Volatility Fit scorer: stop distance against the asset's daily range."""
from __future__ import annotations

from collections.abc import Mapping

import structlog

from grader.asset_classes import ASSET_CLASS_MAP, AssetClassInfo, get_asset_class
from grader.config import DEFAULT_ADR_TYPICAL, UNKNOWN_ASSET_LABEL
from grader.models import VolatilityLabel, VolatilityResult
from grader.scorers.base import BaseScorer, fmt_number

log = structlog.get_logger()


class VolatilityScorer(BaseScorer):
    name = "Volatility Fit"

    TIGHT_RATIO = 0.5
    WIDE_RATIO = 1.5

    def evaluate(
        self,
        stop_percent: float,
        asset_class: str,
        asset_classes: Mapping[str, AssetClassInfo] = ASSET_CLASS_MAP,
    ) -> VolatilityResult:
        asset = get_asset_class(asset_class, asset_classes)
        if asset is None:
            log.warning("asset_class_unknown", asset_class=asset_class, adr_typical=DEFAULT_ADR_TYPICAL)
            adr_typical, asset_label = DEFAULT_ADR_TYPICAL, None
        else:
            adr_typical, asset_label = asset.adr_typical, asset.label

        ratio = stop_percent / adr_typical
        stop = fmt_number(stop_percent)
        adr = fmt_number(adr_typical)
        where = asset_label or UNKNOWN_ASSET_LABEL

        if ratio < self.TIGHT_RATIO:
            score, label = 20, VolatilityLabel.too_tight
            note = (
                f"Stop of {stop}% is less than half the typical daily range ({adr}%) for {where}. "
                "Normal price noise will stop you out constantly before the trade can develop."
            )
        elif ratio <= self.WIDE_RATIO:
            score, label = 85, VolatilityLabel.acceptable
            note = (
                f"Stop of {stop}% fits well within the typical daily range ({adr}%) for {where}. "
                "Gives the trade room to breathe."
            )
        else:
            score, label = 55, VolatilityLabel.wide
            note = (
                f"Stop of {stop}% is significantly wider than the typical daily range ({adr}%) for {where}. "
                "Either your position size must be smaller, or reconsider stop placement."
            )

        return VolatilityResult(
            stop_percent=stop_percent,
            adr_typical=adr_typical,
            ratio=ratio,
            asset_label=asset_label,
            score=score,
            label=label,
            note=note,
        )
