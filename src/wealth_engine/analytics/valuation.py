"""
Valuation
=========
Present value, cost basis, gains and value-weighted asset assumptions.
"""

from typing import Dict, Sequence

import pandas as pd

from wealth_engine.models.portfolio import AssetCategory, AssetGain, UnifiedAsset


FRAME_COLUMNS = [
    'id', 'category', 'region', 'currency', 'quantity', 'current_price',
    'purchase_price', 'value', 'cost_basis', 'expected_return', 'volatility',
]


# =========================
# VALUE
# =========================

def asset_value(asset: UnifiedAsset) -> float:
    return asset.value


def total_value(assets: Sequence[UnifiedAsset]) -> float:
    """Sum of quantity x current price. 0.0 for an empty list."""
    return sum((asset.value for asset in assets), 0.0)


def cost_basis(assets: Sequence[UnifiedAsset]) -> float:
    return sum((asset.cost_basis for asset in assets), 0.0)


def value_by_category(assets: Sequence[UnifiedAsset]) -> Dict[AssetCategory, float]:
    """Summed value per category, in first-seen order (zero-value categories included)."""
    totals: Dict[AssetCategory, float] = {}
    for asset in assets:
        totals[asset.category] = totals.get(asset.category, 0.0) + asset.value
    return totals


# =========================
# GAINS
# =========================

def _gain(current: float, basis: float) -> AssetGain:
    gain = current - basis
    gain_percent = gain / basis * 100 if basis > 0 else 0.0
    return AssetGain(gain=gain, gain_percent=gain_percent)


def asset_gain(asset: UnifiedAsset) -> AssetGain:
    """Unrealised gain vs purchase price; gain_percent is 0 when cost basis is 0."""
    return _gain(asset.value, asset.cost_basis)


def portfolio_gain(assets: Sequence[UnifiedAsset]) -> AssetGain:
    return _gain(total_value(assets), cost_basis(assets))


# =========================
# WEIGHTED ASSUMPTIONS
# =========================

def _value_weighted(assets: Sequence[UnifiedAsset], attr: str) -> float:
    total = total_value(assets)
    if total <= 0:
        return 0.0
    return sum(asset.value / total * getattr(asset, attr) for asset in assets)


def weighted_expected_return(assets: Sequence[UnifiedAsset]) -> float:
    """Value-weighted expected return; 0.0 for a zero-value portfolio."""
    return _value_weighted(assets, 'expected_return')


def weighted_volatility(assets: Sequence[UnifiedAsset]) -> float:
    """Value-weighted volatility (no correlation model); 0.0 for a zero-value portfolio."""
    return _value_weighted(assets, 'volatility')


# =========================
# FRAME VIEW
# =========================

def assets_to_frame(assets: Sequence[UnifiedAsset]) -> pd.DataFrame:
    """One row per asset with derived value / cost_basis columns."""
    rows = [
        {
            'id': a.id,
            'category': a.category,
            'region': a.region,
            'currency': a.currency,
            'quantity': a.quantity,
            'current_price': a.current_price,
            'purchase_price': a.purchase_price,
            'value': a.value,
            'cost_basis': a.cost_basis,
            'expected_return': a.expected_return,
            'volatility': a.volatility,
        }
        for a in assets
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
