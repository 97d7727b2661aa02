"""
Allocation Analysis
===================
Percentage of portfolio value per asset category (and per region).

Percentages are computed independently per group and are not forced to
sum to exactly 100; consumers tolerate small rounding drift.
"""

from typing import Dict, Hashable, Sequence

from wealth_engine.analytics.valuation import assets_to_frame
from wealth_engine.models.portfolio import AssetCategory, UnifiedAsset
from wealth_engine.utils.logger import get_logger

logger = get_logger(__name__)


def _allocation_by(assets: Sequence[UnifiedAsset], column: str) -> Dict[Hashable, float]:
    frame = assets_to_frame(assets)
    total = float(frame['value'].sum()) if not frame.empty else 0.0
    if total <= 0:
        return {}

    grouped = frame.groupby(column, sort=False)['value'].sum()
    grouped = grouped[grouped > 0]
    return {key: float(value / total * 100) for key, value in grouped.items()}


def calculate_allocation(assets: Sequence[UnifiedAsset]) -> Dict[AssetCategory, float]:
    """
    Category -> percent of total value.

    Only categories with nonzero value appear; an empty or all-zero
    portfolio yields {}.
    """
    allocation = {AssetCategory(k): v for k, v in _allocation_by(assets, 'category').items()}
    logger.debug(f"Allocation over {len(allocation)} categories")
    return allocation


def allocation_by_region(assets: Sequence[UnifiedAsset]) -> Dict[str, float]:
    """Region -> percent of total value, same rules as calculate_allocation()."""
    return {str(k): v for k, v in _allocation_by(assets, 'region').items()}
