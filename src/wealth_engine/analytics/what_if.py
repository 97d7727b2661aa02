"""
What-If Scenario Comparison
===========================
Two projection runs on one year axis: current assumptions vs modified
assumptions (optionally with a one-time lump sum at year 0).
"""

import math
from numbers import Real
from typing import Optional, Sequence

from wealth_engine.analytics.projection import project_portfolio, validate_amount
from wealth_engine.analytics.valuation import total_value
from wealth_engine.config.settings import EngineConfig, get_config
from wealth_engine.models.portfolio import AssumptionSet, UnifiedAsset, WhatIfResult
from wealth_engine.utils.exceptions import InvalidAgeRangeError
from wealth_engine.utils.logger import get_logger

logger = get_logger(__name__)


def years_to_retirement(current_age, retirement_age, cap: int) -> int:
    """
    min(retirement_age - current_age, cap).

    Raises:
        InvalidAgeRangeError: non-numeric or non-finite ages, negative current age, or
            retirement before the current age
    """
    for age in (current_age, retirement_age):
        if isinstance(age, bool) or not isinstance(age, Real):
            raise InvalidAgeRangeError(current_age, retirement_age, "ages must be numeric")
        if not math.isfinite(age):
            raise InvalidAgeRangeError(current_age, retirement_age, "ages must be finite")
    if current_age < 0:
        raise InvalidAgeRangeError(current_age, retirement_age, "current age must be >= 0")
    horizon = retirement_age - current_age
    if horizon < 0:
        raise InvalidAgeRangeError(current_age, retirement_age)
    return int(min(horizon, cap))


def compare_what_if(
    assets: Sequence[UnifiedAsset],
    current: AssumptionSet,
    modified: AssumptionSet,
    current_age,
    config: Optional[EngineConfig] = None,
) -> WhatIfResult:
    """
    Project `current` and `modified` assumption sets side by side.

    Both series run over the longer of the two capped horizons, so they
    can be subtracted point-wise; each set's own horizon is reported on
    the result. The modified set's additional_investment is added to the
    starting value only. Equal sets with no lump sum give identical series.

    Raises:
        InvalidAgeRangeError, InvalidContributionError
    """
    config = get_config(config)
    cap = config.horizon_cap_years

    current_horizon = years_to_retirement(current_age, current.retirement_age, cap)
    what_if_horizon = years_to_retirement(current_age, modified.retirement_age, cap)
    horizon = max(current_horizon, what_if_horizon)

    lump_sum = validate_amount(modified.additional_investment, "additional_investment")
    start = total_value(assets)

    current_series = project_portfolio(assets, current.monthly_contribution, horizon, config)
    what_if_series = project_portfolio(
        assets, modified.monthly_contribution, horizon, config,
        starting_value=start + lump_sum,
    )

    logger.debug(
        f"What-if over {horizon}y: current final {current_series.final_value:,.2f}, "
        f"what-if final {what_if_series.final_value:,.2f}"
    )
    return WhatIfResult(
        current=current_series,
        what_if=what_if_series,
        current_horizon=current_horizon,
        what_if_horizon=what_if_horizon,
    )
