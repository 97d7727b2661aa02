"""
Models Module
=============
Dataclasses for type safety and structured output.

Every result the engine hands to the dashboard is one of these types.
Result types expose to_dict() / to_json(); series types also expose
to_frame() for charting code that works on pandas.
"""

import json
import math
from dataclasses import dataclass, field, fields, asdict
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd


# ================================================================================
# ENUMS
# ================================================================================

class AssetCategory(str, Enum):
    """Closed set of asset categories the engine understands."""
    STOCK = "stock"
    ETF = "etf"
    BOND = "bond"
    PROPERTY = "property"
    CRYPTO = "crypto"
    RETIREMENT_ACCOUNT = "retirement-account"
    CASH = "cash"


class Scenario(str, Enum):
    """Named growth scenarios of a ScenarioBundle."""
    BASE = "base"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (np.integer,)):
        return int(value)
    if isinstance(value, (np.floating,)):
        return float(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


# ================================================================================
# ASSETS
# ================================================================================

@dataclass(frozen=True)
class UnifiedAsset:
    """
    Normalized holding.

    Produced by the normalizer; immutable for the duration of a
    computation. `value` is derived on demand and never stored.
    """
    id: str
    category: AssetCategory
    quantity: float
    purchase_price: float
    current_price: float
    expected_return: float
    volatility: float
    currency: str = ""
    region: str = ""
    exchange: str = ""
    purchase_date: Optional[date] = None
    symbol: Optional[str] = None
    name: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def value(self) -> float:
        """Current market value (quantity x current price)."""
        return self.quantity * self.current_price

    @property
    def cost_basis(self) -> float:
        """Purchase value (quantity x purchase price)."""
        return self.quantity * self.purchase_price

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['metadata'] = dict(self.metadata)
        data['category'] = self.category.value
        data['purchase_date'] = self.purchase_date.isoformat() if self.purchase_date else None
        data['value'] = self.value
        return data


@dataclass(frozen=True)
class AssetGain:
    """Unrealised gain of a holding or portfolio."""
    gain: float
    gain_percent: float


# ================================================================================
# PROJECTIONS
# ================================================================================

@dataclass(frozen=True)
class ProjectionPoint:
    """
    One simulated year.

    Invariant: growth == total_value - contributions.
    """
    year: int
    total_value: float
    contributions: float
    growth: float
    real_value: float

    @classmethod
    def build(cls, year: int, total_value: float, contributions: float,
              inflation_rate: float = 0.0) -> "ProjectionPoint":
        """Create a point, deriving growth and the inflation-adjusted value."""
        return cls(
            year=year,
            total_value=total_value,
            contributions=contributions,
            growth=total_value - contributions,
            real_value=total_value / (1 + inflation_rate) ** year,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectionSeries:
    """Year-ascending projection, length horizon + 1 (year 0 included)."""
    points: Tuple[ProjectionPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def horizon(self) -> int:
        return len(self.points) - 1

    @property
    def starting_value(self) -> float:
        return self.points[0].total_value

    @property
    def final_value(self) -> float:
        return self.points[-1].total_value

    def total_values(self) -> List[float]:
        return [p.total_value for p in self.points]

    def to_list(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.points]

    def to_frame(self, start_year: Optional[int] = None) -> pd.DataFrame:
        """
        Series as a DataFrame indexed by year offset.

        Args:
            start_year: If given, adds a `calendar_year` column
                (start_year + offset) for chart axes.
        """
        df = pd.DataFrame(self.to_list()).set_index('year')
        if start_year is not None:
            df.insert(0, 'calendar_year', df.index + start_year)
        return df


@dataclass(frozen=True)
class ScenarioBundle:
    """Base / optimistic / pessimistic projections sharing one year-0 anchor."""
    base_case: ProjectionSeries
    optimistic: ProjectionSeries
    pessimistic: ProjectionSeries

    def get(self, scenario: Scenario) -> ProjectionSeries:
        return {
            Scenario.BASE: self.base_case,
            Scenario.OPTIMISTIC: self.optimistic,
            Scenario.PESSIMISTIC: self.pessimistic,
        }[Scenario(scenario)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'base_case': self.base_case.to_list(),
            'optimistic': self.optimistic.to_list(),
            'pessimistic': self.pessimistic.to_list(),
        }

    def to_frame(self) -> pd.DataFrame:
        """Total value per scenario, one column each, indexed by year."""
        return pd.DataFrame({
            Scenario.BASE.value: self.base_case.total_values(),
            Scenario.OPTIMISTIC.value: self.optimistic.total_values(),
            Scenario.PESSIMISTIC.value: self.pessimistic.total_values(),
        }, index=pd.RangeIndex(len(self.base_case), name='year'))


# ================================================================================
# WHAT-IF
# ================================================================================

@dataclass(frozen=True)
class AssumptionSet:
    """
    Contribution / retirement assumptions for one side of a what-if.

    additional_investment is a one-time lump sum at year 0; it is only
    honoured on the modified side of a comparison.
    """
    monthly_contribution: float
    retirement_age: int
    additional_investment: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WhatIfResult:
    """Two parallel futures on one year axis."""
    current: ProjectionSeries
    what_if: ProjectionSeries
    current_horizon: int
    what_if_horizon: int

    def difference(self) -> List[float]:
        """Point-wise what_if - current total value."""
        return [w.total_value - c.total_value for c, w in zip(self.current, self.what_if)]

    @property
    def final_difference(self) -> float:
        return self.what_if.final_value - self.current.final_value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'current': self.current.to_list(),
            'what_if': self.what_if.to_list(),
            'current_horizon': self.current_horizon,
            'what_if_horizon': self.what_if_horizon,
        }

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame({
            'current': self.current.total_values(),
            'what_if': self.what_if.total_values(),
        }, index=pd.RangeIndex(len(self.current), name='year'))
        df['difference'] = df['what_if'] - df['current']
        return df


# ================================================================================
# MONTE CARLO
# ================================================================================

@dataclass(frozen=True)
class MonteCarloResult:
    """Distribution of simulated portfolio values for one year."""
    year: int
    percentile_10: float
    percentile_25: float
    percentile_50: float
    percentile_75: float
    percentile_90: float
    mean: float
    standard_deviation: float
    probability_of_success: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ================================================================================
# DASHBOARD SNAPSHOT
# ================================================================================

@dataclass
class PortfolioSnapshot:
    """
    Dashboard KPI bundle for one holdings list.

    allocation keys are AssetCategory members; to_dict() flattens them to
    their string values.
    """
    total_value: float
    cost_basis: float
    total_gain: float
    gain_percent: float
    allocation: Dict[AssetCategory, float]
    risk_score: int
    diversification_score: int
    weighted_expected_return: float
    weighted_volatility: float
    asset_count: int
    snapshot_hash: str = ""

    @property
    def is_empty(self) -> bool:
        return self.asset_count == 0 or math.isclose(self.total_value, 0.0)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['allocation'] = {cat.value: pct for cat, pct in self.allocation.items()}
        return data

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=_json_default)

    def __str__(self) -> str:
        lines = [
            f"Total value:      {self.total_value:,.2f}",
            f"Gain:             {self.total_gain:,.2f} ({self.gain_percent:.2f}%)",
            f"Risk score:       {self.risk_score}/100",
            f"Diversification:  {self.diversification_score}/100",
        ]
        for cat, pct in sorted(self.allocation.items(), key=lambda kv: -kv[1]):
            lines.append(f"  {cat.value:<20} {pct:6.2f}%")
        return "\n".join(lines)
