"""
Pipeline Module
===============
Orchestration entry points used by the dashboard screens.

- analyze_portfolio(): KPI snapshot (value, gain, allocation, scores)
- build_dashboard(): snapshot + scenario projections in one call

Both accept raw holdings or already normalized UnifiedAssets and are
pure: nothing is cached between calls.
"""

from typing import Any, Dict, Optional

from wealth_engine.analytics.allocation import calculate_allocation
from wealth_engine.analytics.projection import project_scenarios
from wealth_engine.analytics.scoring import calculate_diversification_score, calculate_risk_score
from wealth_engine.analytics.valuation import (
    cost_basis,
    portfolio_gain,
    total_value,
    weighted_expected_return,
    weighted_volatility,
)
from wealth_engine.config.settings import EngineConfig, get_config
from wealth_engine.core.snapshot_hash import build_snapshot_hash
from wealth_engine.data.normalizer import HoldingsInput, normalize_holdings
from wealth_engine.models.portfolio import PortfolioSnapshot
from wealth_engine.utils.logger import get_logger, log_performance

logger = get_logger(__name__)


def _build_snapshot(assets, config: EngineConfig) -> PortfolioSnapshot:
    gain = portfolio_gain(assets)
    snapshot = PortfolioSnapshot(
        total_value=total_value(assets),
        cost_basis=cost_basis(assets),
        total_gain=gain.gain,
        gain_percent=gain.gain_percent,
        allocation=calculate_allocation(assets),
        risk_score=calculate_risk_score(assets, config),
        diversification_score=calculate_diversification_score(assets),
        weighted_expected_return=weighted_expected_return(assets),
        weighted_volatility=weighted_volatility(assets),
        asset_count=len(assets),
        snapshot_hash=build_snapshot_hash(assets, config),
    )
    logger.debug(
        f"Snapshot: value={snapshot.total_value:,.2f} risk={snapshot.risk_score} "
        f"diversification={snapshot.diversification_score}"
    )
    return snapshot


@log_performance(logger)
def analyze_portfolio(holdings: HoldingsInput, config: Optional[EngineConfig] = None) -> PortfolioSnapshot:
    """
    Compute the dashboard KPI snapshot for a holdings list.

    Empty or all-zero portfolios yield zeroed values, an empty allocation,
    a neutral risk score and a zero diversification score.
    """
    config = get_config(config)
    return _build_snapshot(normalize_holdings(holdings, config), config)


@log_performance(logger)
def build_dashboard(
    holdings: HoldingsInput,
    monthly_contribution: float,
    horizon_years: int,
    config: Optional[EngineConfig] = None,
) -> Dict[str, Any]:
    """
    Snapshot plus scenario projections for the dashboard screen.

    Returns:
        {'snapshot': PortfolioSnapshot, 'projections': ScenarioBundle}

    Raises:
        InvalidHorizonError, InvalidContributionError
    """
    config = get_config(config)
    assets = normalize_holdings(holdings, config)
    return {
        'snapshot': _build_snapshot(assets, config),
        'projections': project_scenarios(assets, monthly_contribution, horizon_years, config),
    }
