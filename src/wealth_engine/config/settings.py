"""
Engine Configuration
====================
Single source of truth for the projection and scoring assumptions.

The growth constants are configuration, not engineering: callers tune
them per deployment (see config/loader.py) and pass the resulting
EngineConfig into the engine functions.
"""

import math
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional

from wealth_engine.config.regional import get_regional_config
from wealth_engine.utils.exceptions import ConfigurationError


GROWTH_MODELS = ("uniform", "blended")


# =========================
# PROJECTION ASSUMPTIONS
# =========================

PROJECTION_DEFAULTS = {
    'growth_model': 'uniform',           # 'uniform' -> base rate; 'blended' -> value-weighted asset returns
    'base_growth_rate': 0.075,           # Annual nominal growth, base case
    'optimistic_multiplier': 1.30,       # Applied to base-case total value for t >= 1
    'pessimistic_multiplier': 0.75,      # Applied to base-case total value for t >= 1
    'horizon_cap_years': 30,             # What-if horizon cap
}


# =========================
# SCORING PARAMETERS
# =========================

SCORING_DEFAULTS = {
    'concentration_penalty': 20.0,       # Risk points added at HHI = 1 (single category)
    'neutral_risk_score': 50,            # Risk score of an empty portfolio
}


# =========================
# MONTE CARLO
# =========================

MONTE_CARLO_DEFAULTS = {
    'simulations': 1000,
    'seed': None,                        # None -> fresh entropy per run
}


@dataclass(frozen=True)
class EngineConfig:
    """
    Immutable engine assumptions.

    Validation:
    - growth_model in GROWTH_MODELS
    - base_growth_rate > -1
    - scenario multipliers > 0
    - horizon_cap_years >= 0
    """
    growth_model: str = PROJECTION_DEFAULTS['growth_model']
    base_growth_rate: float = PROJECTION_DEFAULTS['base_growth_rate']
    optimistic_multiplier: float = PROJECTION_DEFAULTS['optimistic_multiplier']
    pessimistic_multiplier: float = PROJECTION_DEFAULTS['pessimistic_multiplier']
    horizon_cap_years: int = PROJECTION_DEFAULTS['horizon_cap_years']
    concentration_penalty: float = SCORING_DEFAULTS['concentration_penalty']
    neutral_risk_score: int = SCORING_DEFAULTS['neutral_risk_score']
    region: str = 'AU'
    monte_carlo_simulations: int = MONTE_CARLO_DEFAULTS['simulations']
    monte_carlo_seed: Optional[int] = MONTE_CARLO_DEFAULTS['seed']

    def __post_init__(self):
        if self.growth_model not in GROWTH_MODELS:
            raise ConfigurationError(
                f"growth_model must be one of {GROWTH_MODELS}, got {self.growth_model!r}"
            )
        if not math.isfinite(self.base_growth_rate) or self.base_growth_rate <= -1:
            raise ConfigurationError("base_growth_rate must be a finite number > -1")
        if self.optimistic_multiplier <= 0 or self.pessimistic_multiplier <= 0:
            raise ConfigurationError("scenario multipliers must be > 0")
        if self.horizon_cap_years < 0:
            raise ConfigurationError("horizon_cap_years must be >= 0")
        if self.concentration_penalty < 0:
            raise ConfigurationError("concentration_penalty must be >= 0")
        if not 0 <= self.neutral_risk_score <= 100:
            raise ConfigurationError("neutral_risk_score must be within [0, 100]")
        if self.monte_carlo_simulations <= 0:
            raise ConfigurationError("monte_carlo_simulations must be > 0")
        get_regional_config(self.region)

    def with_overrides(self, **overrides: Any) -> "EngineConfig":
        """Return a validated copy with the given fields replaced."""
        unknown = set(overrides) - set(self.to_dict())
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = EngineConfig()


def get_config(config: Optional[EngineConfig] = None) -> EngineConfig:
    """Resolve an optional caller config to a concrete one."""
    return config if config is not None else DEFAULT_CONFIG
