"""
Wealth Engine
=============
Deterministic portfolio calculation engine for a personal investment /
retirement dashboard.

Main Components:
    - data: Holding normalization, category taxonomy, holdings files
    - analytics: Valuation, allocation, scores, projections, what-if, Monte Carlo
    - core: Snapshot pipeline, snapshot hashing, CLI runner
    - reporting: Console output, JSON / DataFrame export
    - config: Engine assumptions and regional rules
    - models: Type-safe data structures
    - utils: Logging, exceptions

Example:
    >>> from wealth_engine import normalize_holdings, project_scenarios
    >>> assets = normalize_holdings([{"type": "stock", "quantity": 10, "currentPrice": 100}])
    >>> project_scenarios(assets, monthly_contribution=500, horizon_years=1).base_case[1].total_value
    7075.0
"""

__version__ = "1.0.0"

from wealth_engine.models.portfolio import (
    AssetCategory,
    AssetGain,
    AssumptionSet,
    MonteCarloResult,
    PortfolioSnapshot,
    ProjectionPoint,
    ProjectionSeries,
    Scenario,
    ScenarioBundle,
    UnifiedAsset,
    WhatIfResult,
)
from wealth_engine.config.settings import DEFAULT_CONFIG, EngineConfig
from wealth_engine.data.normalizer import normalize_holding, normalize_holdings
from wealth_engine.analytics import (
    calculate_allocation,
    calculate_diversification_score,
    calculate_risk_score,
    compare_what_if,
    project_portfolio,
    project_scenarios,
    run_monte_carlo,
    total_value,
)
from wealth_engine.core.pipeline import analyze_portfolio, build_dashboard
from wealth_engine.utils.exceptions import (
    InvalidAgeRangeError,
    InvalidContributionError,
    InvalidHoldingError,
    InvalidHorizonError,
    PortfolioEngineError,
)
