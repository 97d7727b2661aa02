"""
Projection Engine
=================
Deterministic multi-year growth under recurring contributions.

Formula (per year t = 1..horizon, m = monthly contribution):

    V_t = V_{t-1} * (1 + r) + 12 * m
    C_t = C_{t-1} + 12 * m          (C_0 = V_0, the starting value)
    G_t = V_t - C_t

r is EngineConfig.base_growth_rate for the 'uniform' growth model, or the
value-weighted asset expected return for 'blended'.

Optimistic / pessimistic curves are the base curve's total value times
fixed factors for t >= 1, so all three share the year-0 anchor and the
same contributions. No randomness.
"""

import math
from decimal import Decimal
from numbers import Integral, Real
from typing import Optional, Sequence

from wealth_engine.analytics.valuation import total_value, weighted_expected_return
from wealth_engine.config.regional import get_regional_config
from wealth_engine.config.settings import EngineConfig, get_config
from wealth_engine.models.portfolio import ProjectionPoint, ProjectionSeries, ScenarioBundle, UnifiedAsset
from wealth_engine.utils.exceptions import InvalidContributionError, InvalidHorizonError
from wealth_engine.utils.logger import get_logger

logger = get_logger(__name__)


# =========================
# VALIDATION
# =========================

def validate_horizon(horizon_years) -> int:
    if isinstance(horizon_years, bool) or not isinstance(horizon_years, Integral):
        raise InvalidHorizonError(horizon_years)
    if horizon_years < 0:
        raise InvalidHorizonError(horizon_years)
    return int(horizon_years)


def validate_amount(amount, parameter: str = "monthly_contribution") -> float:
    """Coerce a money amount (int, float, Decimal, numpy scalar) to a finite float >= 0."""
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        raise InvalidContributionError(amount, parameter)
    try:
        number = float(amount)
    except (ValueError, OverflowError):
        raise InvalidContributionError(amount, parameter) from None
    if not math.isfinite(number) or number < 0:
        raise InvalidContributionError(amount, parameter)
    return number


# =========================
# GROWTH RATE
# =========================

# Floor for the blended rate: a total loss keeps V_t >= 0
MIN_GROWTH_RATE = -1.0


def resolve_growth_rate(assets: Sequence[UnifiedAsset], config: Optional[EngineConfig] = None) -> float:
    """Annual base-case growth rate under the configured growth model."""
    config = get_config(config)
    if config.growth_model == "blended" and total_value(assets) > 0:
        rate = weighted_expected_return(assets)
        if rate < MIN_GROWTH_RATE:
            logger.warning(f"Blended growth rate {rate:.4f} below {MIN_GROWTH_RATE}, clamped")
            return MIN_GROWTH_RATE
        return rate
    return config.base_growth_rate


# =========================
# PROJECTIONS
# =========================

def project_portfolio(
    assets: Sequence[UnifiedAsset],
    monthly_contribution: float,
    horizon_years: int,
    config: Optional[EngineConfig] = None,
    starting_value: Optional[float] = None,
) -> ProjectionSeries:
    """
    Base-case projection.

    Args:
        assets: Normalized assets
        monthly_contribution: Recurring contribution, >= 0
        horizon_years: Number of simulated years, integer >= 0
        config: Engine assumptions
        starting_value: Overrides total_value(assets) as V_0 (used for
            one-time lump sums)

    Returns:
        ProjectionSeries of length horizon_years + 1

    Raises:
        InvalidHorizonError, InvalidContributionError
    """
    config = get_config(config)
    horizon = validate_horizon(horizon_years)
    monthly = validate_amount(monthly_contribution)
    if starting_value is None:
        starting_value = total_value(assets)
    else:
        starting_value = validate_amount(starting_value, "starting_value")

    rate = resolve_growth_rate(assets, config)
    inflation = get_regional_config(config.region).inflation_rate
    annual = monthly * 12

    value = starting_value
    contributions = starting_value
    points = [ProjectionPoint.build(0, value, contributions, inflation)]
    for year in range(1, horizon + 1):
        value = value * (1 + rate) + annual
        contributions = contributions + annual
        points.append(ProjectionPoint.build(year, value, contributions, inflation))

    logger.debug(
        f"Projected {horizon}y from {starting_value:,.2f} at r={rate:.4f}, "
        f"monthly={monthly:,.2f} -> {value:,.2f}"
    )
    return ProjectionSeries(points=tuple(points))


def scale_series(series: ProjectionSeries, factor: float, config: Optional[EngineConfig] = None) -> ProjectionSeries:
    """
    Derive a scenario curve: total value x factor for t >= 1, year 0 untouched,
    contributions unchanged, growth recomputed.
    """
    inflation = get_regional_config(get_config(config).region).inflation_rate
    points = [series[0]]
    for point in series.points[1:]:
        points.append(ProjectionPoint.build(point.year, point.total_value * factor, point.contributions, inflation))
    return ProjectionSeries(points=tuple(points))


def project_scenarios(
    assets: Sequence[UnifiedAsset],
    monthly_contribution: float,
    horizon_years: int,
    config: Optional[EngineConfig] = None,
) -> ScenarioBundle:
    """
    Base, optimistic and pessimistic projections of equal length sharing
    one starting value.
    """
    config = get_config(config)
    base_case = project_portfolio(assets, monthly_contribution, horizon_years, config)
    return ScenarioBundle(
        base_case=base_case,
        optimistic=scale_series(base_case, config.optimistic_multiplier, config),
        pessimistic=scale_series(base_case, config.pessimistic_multiplier, config),
    )
