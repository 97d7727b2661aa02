"""
Risk & Diversification Scores
=============================
0-100 integer scores built on the category concentration index.

concentration_index = sum of squared category value fractions (HHI):
1.0 for a single-category portfolio, 1/k for k evenly weighted categories.
"""

from typing import Optional, Sequence

import numpy as np

from wealth_engine.analytics.valuation import value_by_category
from wealth_engine.config.settings import EngineConfig, get_config
from wealth_engine.data.definitions.categories import risk_coefficient
from wealth_engine.models.portfolio import UnifiedAsset


def _category_weights(assets: Sequence[UnifiedAsset]):
    values = value_by_category(assets)
    amounts = np.array(list(values.values()), dtype=float)
    total = amounts.sum() if amounts.size else 0.0
    if total <= 0:
        return list(values.keys()), None
    return list(values.keys()), amounts / total


def _clamp_score(score: float) -> int:
    return int(round(min(max(score, 0.0), 100.0)))


def concentration_index(assets: Sequence[UnifiedAsset]) -> Optional[float]:
    """Herfindahl index over category weights; None for a zero-value portfolio."""
    _, weights = _category_weights(assets)
    if weights is None:
        return None
    return float(np.square(weights).sum())


def calculate_risk_score(assets: Sequence[UnifiedAsset], config: Optional[EngineConfig] = None) -> int:
    """
    Composite risk score in [0, 100].

    Value-weighted category risk coefficient scaled to 0-100, plus a
    concentration penalty proportional to the HHI. An empty or zero-value
    portfolio scores the configured neutral value (50).
    """
    config = get_config(config)
    categories, weights = _category_weights(assets)
    if weights is None:
        return config.neutral_risk_score

    coefficients = np.array([risk_coefficient(c) for c in categories], dtype=float)
    base = 100.0 * float(weights @ coefficients)
    penalty = config.concentration_penalty * float(np.square(weights).sum())
    return _clamp_score(base + penalty)


def calculate_diversification_score(assets: Sequence[UnifiedAsset]) -> int:
    """100 x (1 - HHI) in [0, 100]; 0 for an empty or zero-value portfolio."""
    hhi = concentration_index(assets)
    if hhi is None:
        return 0
    return _clamp_score(100.0 * (1.0 - hhi))
