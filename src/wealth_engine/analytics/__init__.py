"""
Analytics Submodule
===================
Portfolio calculations over normalized assets.

Modules:
- valuation: present value, cost basis, gains, weighted assumptions
- allocation: category / region percentage breakdown
- scoring: risk and diversification scores
- projection: deterministic scenario projections
- what_if: current vs modified assumption comparison
- monte_carlo: seedable stochastic simulation

All functions re-exported for convenience.
"""

# Valuation
from wealth_engine.analytics.valuation import (
    asset_value,
    total_value,
    cost_basis,
    value_by_category,
    asset_gain,
    portfolio_gain,
    weighted_expected_return,
    weighted_volatility,
    assets_to_frame,
)

# Allocation
from wealth_engine.analytics.allocation import (
    calculate_allocation,
    allocation_by_region,
)

# Scores
from wealth_engine.analytics.scoring import (
    concentration_index,
    calculate_risk_score,
    calculate_diversification_score,
)

# Projections
from wealth_engine.analytics.projection import (
    project_portfolio,
    project_scenarios,
    resolve_growth_rate,
)

from wealth_engine.analytics.what_if import (
    compare_what_if,
    years_to_retirement,
)

from wealth_engine.analytics.monte_carlo import run_monte_carlo
