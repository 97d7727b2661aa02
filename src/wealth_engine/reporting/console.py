"""
Console Output Module
=====================
Plain-text rendering of engine results for the CLI.

Include:
- print_snapshot: KPI summary and allocation table
- print_projections: scenario table
- print_what_if: current vs what-if table
- print_monte_carlo: percentile bands
"""

from typing import List, Optional

from wealth_engine.models.portfolio import MonteCarloResult, PortfolioSnapshot, ScenarioBundle, WhatIfResult


def _header(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"{title:^70}")
    print("=" * 70)


def print_snapshot(snapshot: PortfolioSnapshot, currency: str = "") -> None:
    """Print the KPI snapshot."""
    _header("PORTFOLIO SNAPSHOT")

    print("\n💰 VALUE")
    print("-" * 50)
    print(f"  Total value:            {snapshot.total_value:>16,.2f} {currency}")
    print(f"  Cost basis:             {snapshot.cost_basis:>16,.2f} {currency}")
    print(f"  Unrealised gain:        {snapshot.total_gain:>16,.2f} ({snapshot.gain_percent:+.2f}%)")
    print(f"  Holdings:               {snapshot.asset_count:>16}")

    print("\n📊 SCORES")
    print("-" * 50)
    print(f"  Risk score:             {snapshot.risk_score:>13}/100")
    print(f"  Diversification score:  {snapshot.diversification_score:>13}/100")
    print(f"  Expected return (wtd):  {snapshot.weighted_expected_return:>16.2%}")
    print(f"  Volatility (wtd):       {snapshot.weighted_volatility:>16.2%}")

    print("\n🥧 ALLOCATION")
    print("-" * 50)
    if not snapshot.allocation:
        print("  (no holdings with value)")
    for category, pct in sorted(snapshot.allocation.items(), key=lambda kv: -kv[1]):
        bar = "█" * int(round(pct / 5))
        print(f"  {category.value:<20} {pct:>7.2f}%  {bar}")


def print_projections(bundle: ScenarioBundle, step: int = 5) -> None:
    """Print base / optimistic / pessimistic totals every `step` years (and the final year)."""
    _header("PROJECTIONS")
    print(f"\n  {'Year':>4}  {'Contributions':>16}  {'Pessimistic':>16}  {'Base':>16}  {'Optimistic':>16}")
    print("  " + "-" * 76)
    last = bundle.base_case.horizon
    for year in range(0, last + 1):
        if year % step and year != last:
            continue
        base = bundle.base_case[year]
        print(
            f"  {year:>4}  {base.contributions:>16,.0f}  {bundle.pessimistic[year].total_value:>16,.0f}  "
            f"{base.total_value:>16,.0f}  {bundle.optimistic[year].total_value:>16,.0f}"
        )


def print_what_if(result: WhatIfResult, step: int = 5) -> None:
    """Print current vs what-if totals and the point-wise difference."""
    _header("WHAT-IF COMPARISON")
    print(f"\n  Retirement in {result.current_horizon}y (current) vs {result.what_if_horizon}y (what-if)")
    print(f"\n  {'Year':>4}  {'Current':>16}  {'What-if':>16}  {'Difference':>16}")
    print("  " + "-" * 58)
    diff = result.difference()
    last = result.current.horizon
    for year in range(0, last + 1):
        if year % step and year != last:
            continue
        print(
            f"  {year:>4}  {result.current[year].total_value:>16,.0f}  "
            f"{result.what_if[year].total_value:>16,.0f}  {diff[year]:>+16,.0f}"
        )


def print_monte_carlo(results: List[MonteCarloResult], retirement_goal: Optional[float] = None) -> None:
    """Print the 10/50/90 percentile band per year."""
    _header("MONTE CARLO")
    print("  Hypothetical scenarios, not forecasts.")
    goal_col = "  P(goal)" if retirement_goal is not None else ""
    print(f"\n  {'Year':>4}  {'P10':>14}  {'P50':>14}  {'P90':>14}{goal_col}")
    print("  " + "-" * (52 + len(goal_col)))
    for r in results:
        goal = f"  {r.probability_of_success:>7.1%}" if retirement_goal is not None else ""
        print(f"  {r.year:>4}  {r.percentile_10:>14,.0f}  {r.percentile_50:>14,.0f}  {r.percentile_90:>14,.0f}{goal}")
