"""
Monte Carlo Simulation
======================
Stochastic complement to the deterministic projection.

Randomness is injected: pass `seed` or a numpy Generator for
reproducible runs. Each path draws one annual return per asset from
Normal(expected_return, volatility) (independent assets, allocation
rebalanced to the starting weights every year), then adds the annual
contribution. Values are floored at 0.
"""

from typing import List, Optional, Sequence

import numpy as np

from wealth_engine.analytics.projection import validate_amount, validate_horizon
from wealth_engine.analytics.valuation import total_value
from wealth_engine.config.settings import EngineConfig, get_config
from wealth_engine.models.portfolio import MonteCarloResult, UnifiedAsset
from wealth_engine.utils.logger import get_logger, log_performance

logger = get_logger(__name__)

PERCENTILES = (10, 25, 50, 75, 90)


def _return_parameters(assets: Sequence[UnifiedAsset], config: EngineConfig):
    """Starting weights, means and volatilities; a zero-value portfolio grows at the base rate."""
    total = total_value(assets)
    if total <= 0:
        return np.array([1.0]), np.array([config.base_growth_rate]), np.array([0.0])
    weights = np.array([a.value / total for a in assets], dtype=float)
    means = np.array([a.expected_return for a in assets], dtype=float)
    vols = np.array([a.volatility for a in assets], dtype=float)
    return weights, means, vols


@log_performance(logger)
def run_monte_carlo(
    assets: Sequence[UnifiedAsset],
    monthly_contribution: float,
    horizon_years: int,
    retirement_goal: Optional[float] = None,
    n_simulations: Optional[int] = None,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    config: Optional[EngineConfig] = None,
) -> List[MonteCarloResult]:
    """
    Simulate portfolio value distributions for years 1..horizon.

    Args:
        assets: Normalized assets
        monthly_contribution: Recurring contribution, >= 0
        horizon_years: Number of simulated years, integer >= 0
        retirement_goal: Target value for probability_of_success
            (1.0 for every year when None)
        n_simulations: Paths per run (default from config)
        seed: Seed for a fresh generator (default from config)
        rng: Explicit generator; takes precedence over seed

    Returns:
        One MonteCarloResult per simulated year (empty for horizon 0)
    """
    config = get_config(config)
    horizon = validate_horizon(horizon_years)
    annual = validate_amount(monthly_contribution) * 12
    n_sims = int(n_simulations or config.monte_carlo_simulations)
    if n_sims <= 0:
        raise ValueError("n_simulations must be > 0")
    if rng is None:
        rng = np.random.default_rng(seed if seed is not None else config.monte_carlo_seed)

    weights, means, vols = _return_parameters(assets, config)
    values = np.full(n_sims, total_value(assets), dtype=float)

    results: List[MonteCarloResult] = []
    for year in range(1, horizon + 1):
        draws = rng.normal(means, vols, size=(n_sims, len(weights)))
        portfolio_returns = draws @ weights
        values = np.maximum(values * (1 + portfolio_returns) + annual, 0.0)

        pct = np.percentile(values, PERCENTILES)
        success = float(np.mean(values >= retirement_goal)) if retirement_goal is not None else 1.0
        results.append(MonteCarloResult(
            year=year,
            percentile_10=float(pct[0]),
            percentile_25=float(pct[1]),
            percentile_50=float(pct[2]),
            percentile_75=float(pct[3]),
            percentile_90=float(pct[4]),
            mean=float(values.mean()),
            standard_deviation=float(values.std()),
            probability_of_success=success,
        ))

    logger.debug(f"Monte Carlo: {n_sims} paths x {horizon} years")
    return results
