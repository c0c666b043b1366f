"""Static asset-class reference table.

``adr_typical`` is the midpoint of the usual average daily range and is the
only value the scoring engine reads (via the volatility-fit scorer).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class AssetClassInfo:
    id: str
    label: str
    adr_min: float  # % average daily range, low end
    adr_max: float  # % average daily range, high end
    adr_typical: float


ASSET_CLASSES: tuple[AssetClassInfo, ...] = (
    AssetClassInfo("forex", "Forex", adr_min=0.5, adr_max=1.5, adr_typical=1.0),
    AssetClassInfo("stocks_large", "Large Cap Stocks", adr_min=1.0, adr_max=3.0, adr_typical=2.0),
    AssetClassInfo("stocks_small", "Small Cap Stocks", adr_min=3.0, adr_max=8.0, adr_typical=5.5),
    AssetClassInfo("crypto", "Crypto", adr_min=5.0, adr_max=12.0, adr_typical=8.5),
    AssetClassInfo("indices", "Indices (SPX, NQ, etc.)", adr_min=0.8, adr_max=2.0, adr_typical=1.4),
    AssetClassInfo("commodities", "Commodities (Oil, Gold)", adr_min=1.0, adr_max=3.5, adr_typical=2.0),
)

# Read-only view so no caller can mutate the shared table
ASSET_CLASS_MAP: Mapping[str, AssetClassInfo] = MappingProxyType(
    {a.id: a for a in ASSET_CLASSES}
)


def get_asset_class(
    asset_class_id: str,
    table: Mapping[str, AssetClassInfo] = ASSET_CLASS_MAP,
) -> AssetClassInfo | None:
    """Return the table entry for *asset_class_id*, or ``None`` if unknown."""
    return table.get(asset_class_id)
