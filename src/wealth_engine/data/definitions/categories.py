"""
Asset Category Taxonomy
=======================
Closed category set with per-category defaults.

Include:
- Aliases used by the dashboard / holdings table (super, fd, ppf, ...)
- Default expected return and volatility per category
- Risk coefficients used by the risk score
"""

from typing import Dict, Optional

from wealth_engine.models.portfolio import AssetCategory


# ================================================================================
# CATEGORY ALIASES
# ================================================================================
# Raw discriminators seen in holdings records -> closed category.
# Keys are lower-case with '_' and ' ' folded to '-'.

CATEGORY_ALIASES: Dict[str, AssetCategory] = {
    # Equity
    'stock': AssetCategory.STOCK,
    'stocks': AssetCategory.STOCK,
    'shares': AssetCategory.STOCK,
    'equity': AssetCategory.STOCK,
    # Funds
    'etf': AssetCategory.ETF,
    'etfs': AssetCategory.ETF,
    'fund': AssetCategory.ETF,
    'mutual-fund': AssetCategory.ETF,
    'index-fund': AssetCategory.ETF,
    # Fixed income
    'bond': AssetCategory.BOND,
    'bonds': AssetCategory.BOND,
    'fixed-income': AssetCategory.BOND,
    # Real estate
    'property': AssetCategory.PROPERTY,
    'real-estate': AssetCategory.PROPERTY,
    'reit': AssetCategory.PROPERTY,
    # Digital assets
    'crypto': AssetCategory.CRYPTO,
    'cryptocurrency': AssetCategory.CRYPTO,
    # Retirement wrappers (AU super, IN PPF, US 401k/IRA)
    'retirement-account': AssetCategory.RETIREMENT_ACCOUNT,
    'retirement': AssetCategory.RETIREMENT_ACCOUNT,
    'super': AssetCategory.RETIREMENT_ACCOUNT,
    'superannuation': AssetCategory.RETIREMENT_ACCOUNT,
    'ppf': AssetCategory.RETIREMENT_ACCOUNT,
    '401k': AssetCategory.RETIREMENT_ACCOUNT,
    'ira': AssetCategory.RETIREMENT_ACCOUNT,
    'pension': AssetCategory.RETIREMENT_ACCOUNT,
    # Cash-like
    'cash': AssetCategory.CASH,
    'savings': AssetCategory.CASH,
    'fd': AssetCategory.CASH,
    'fixed-deposit': AssetCategory.CASH,
    'term-deposit': AssetCategory.CASH,
}


# ================================================================================
# CATEGORY DEFAULTS
# ================================================================================
# Long-run nominal assumptions substituted when a holding has no explicit
# expected_return / volatility.

DEFAULT_EXPECTED_RETURNS: Dict[AssetCategory, float] = {
    AssetCategory.STOCK: 0.08,
    AssetCategory.ETF: 0.075,
    AssetCategory.BOND: 0.04,
    AssetCategory.PROPERTY: 0.06,
    AssetCategory.CRYPTO: 0.12,
    AssetCategory.RETIREMENT_ACCOUNT: 0.075,
    AssetCategory.CASH: 0.025,
}

DEFAULT_VOLATILITIES: Dict[AssetCategory, float] = {
    AssetCategory.STOCK: 0.20,
    AssetCategory.ETF: 0.15,
    AssetCategory.BOND: 0.05,
    AssetCategory.PROPERTY: 0.12,
    AssetCategory.CRYPTO: 0.60,
    AssetCategory.RETIREMENT_ACCOUNT: 0.15,
    AssetCategory.CASH: 0.01,
}

# Risk coefficients in [0, 1], ordered
# cash < bond < property = retirement-account < etf < stock < crypto
RISK_COEFFICIENTS: Dict[AssetCategory, float] = {
    AssetCategory.CASH: 0.05,
    AssetCategory.BOND: 0.25,
    AssetCategory.PROPERTY: 0.45,
    AssetCategory.RETIREMENT_ACCOUNT: 0.45,
    AssetCategory.ETF: 0.55,
    AssetCategory.STOCK: 0.70,
    AssetCategory.CRYPTO: 0.95,
}

FALLBACK_CATEGORY = AssetCategory.STOCK


def resolve_category(raw: object) -> Optional[AssetCategory]:
    """
    Map a raw type discriminator onto the closed category set.

    Returns None when the value is missing or unrecognised; the caller
    decides the fallback.
    """
    if isinstance(raw, AssetCategory):
        return raw
    if raw is None:
        return None
    key = str(raw).strip().lower().replace('_', '-').replace(' ', '-')
    return CATEGORY_ALIASES.get(key)


def default_expected_return(category: AssetCategory) -> float:
    return DEFAULT_EXPECTED_RETURNS[category]


def default_volatility(category: AssetCategory) -> float:
    return DEFAULT_VOLATILITIES[category]


def risk_coefficient(category: AssetCategory) -> float:
    return RISK_COEFFICIENTS[category]
