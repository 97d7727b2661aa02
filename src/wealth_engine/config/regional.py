"""
Regional Rules
==============
Per-region currency, inflation and contribution limits.

Tax rates are intentionally not modelled.
"""

from dataclasses import dataclass
from typing import Dict, List

from wealth_engine.utils.exceptions import UnknownRegionError


@dataclass(frozen=True)
class RegionalConfig:
    """Market assumptions for one region."""
    region: str
    currency: str
    inflation_rate: float
    risk_free_rate: float
    concessional_cap: float           # Annual pre-tax retirement contribution limit
    non_concessional_cap: float       # Annual after-tax limit (inf = no limit)


REGIONAL_CONFIGS: Dict[str, RegionalConfig] = {
    'AU': RegionalConfig(
        region='AU',
        currency='AUD',
        inflation_rate=0.025,
        risk_free_rate=0.035,
        concessional_cap=27500,           # Superannuation concessional cap
        non_concessional_cap=110000,
    ),
    'IN': RegionalConfig(
        region='IN',
        currency='INR',
        inflation_rate=0.04,
        risk_free_rate=0.065,
        concessional_cap=150000,          # Section 80C
        non_concessional_cap=float('inf'),
    ),
    'US': RegionalConfig(
        region='US',
        currency='USD',
        inflation_rate=0.023,
        risk_free_rate=0.045,
        concessional_cap=22500,           # 401k
        non_concessional_cap=6000,        # IRA
    ),
}


def get_regional_config(region: str) -> RegionalConfig:
    """
    Look up a region's assumptions.

    Raises:
        UnknownRegionError: region is not configured
    """
    key = (region or '').strip().upper()
    try:
        return REGIONAL_CONFIGS[key]
    except KeyError:
        raise UnknownRegionError(region, sorted(REGIONAL_CONFIGS)) from None


def check_contribution_limits(monthly_contribution: float, region: str) -> List[str]:
    """
    Compare an annualised contribution with the region's caps.

    Returns:
        Human-readable warnings; empty when within both caps.
    """
    config = get_regional_config(region)
    annual = monthly_contribution * 12
    warnings: List[str] = []

    if annual > config.concessional_cap:
        warnings.append(
            f"Annual contribution {annual:,.0f} {config.currency} exceeds the "
            f"{config.region} concessional cap of {config.concessional_cap:,.0f}"
        )
    if annual > config.concessional_cap + config.non_concessional_cap:
        warnings.append(
            f"Annual contribution {annual:,.0f} {config.currency} exceeds the combined "
            f"{config.region} caps of {config.concessional_cap + config.non_concessional_cap:,.0f}"
        )
    return warnings
