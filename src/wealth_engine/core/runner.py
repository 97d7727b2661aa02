"""
CLI Runner
==========
Command-line front end over the engine.

Usage:
    analyze-portfolio --holdings holdings.json --monthly 500 --years 20
    analyze-portfolio --holdings holdings.csv --current-age 35 \\
        --retirement-age 65 --what-if-monthly 800 --additional-investment 10000
"""

import argparse
import json
import sys
from typing import List, Optional

from wealth_engine.analytics.monte_carlo import run_monte_carlo
from wealth_engine.analytics.projection import project_scenarios
from wealth_engine.analytics.what_if import compare_what_if
from wealth_engine.config.loader import load_engine_config
from wealth_engine.config.regional import check_contribution_limits, get_regional_config
from wealth_engine.core.pipeline import analyze_portfolio
from wealth_engine.data.loader import load_holdings_file
from wealth_engine.data.normalizer import normalize_holdings
from wealth_engine.models.portfolio import AssumptionSet
from wealth_engine.reporting import console
from wealth_engine.reporting.export import export_to_json, to_serializable
from wealth_engine.utils.exceptions import PortfolioEngineError
from wealth_engine.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Portfolio valuation, scoring and projections")
    parser.add_argument("--holdings", required=True, help="Path to JSON/YAML/CSV holdings file")
    parser.add_argument("--config", default=None, help="Path to JSON/YAML engine config file")
    parser.add_argument("--region", default=None, help="Override configured region (AU, IN, US)")
    parser.add_argument("--monthly", type=float, default=0.0, help="Monthly contribution")
    parser.add_argument("--years", type=int, default=10, help="Projection horizon in years")

    what_if = parser.add_argument_group("what-if")
    what_if.add_argument("--current-age", type=int, default=None)
    what_if.add_argument("--retirement-age", type=int, default=None)
    what_if.add_argument("--what-if-monthly", type=float, default=None)
    what_if.add_argument("--what-if-retirement-age", type=int, default=None)
    what_if.add_argument("--additional-investment", type=float, default=0.0)

    mc = parser.add_argument_group("monte carlo")
    mc.add_argument("--monte-carlo", action="store_true", help="Also run a Monte Carlo simulation")
    mc.add_argument("--simulations", type=int, default=None)
    mc.add_argument("--seed", type=int, default=None)
    mc.add_argument("--goal", type=float, default=None, help="Retirement goal for probability of success")

    parser.add_argument("--json", action="store_true", help="Print results as JSON instead of tables")
    parser.add_argument("--output", default=None, help="Also write JSON results to this path")
    return parser


def run(args: argparse.Namespace) -> dict:
    """Run the requested computations and return the result objects."""
    config = load_engine_config(args.config)
    if args.region:
        config = config.with_overrides(region=args.region.upper())

    assets = normalize_holdings(load_holdings_file(args.holdings), config)

    results = {
        "snapshot": analyze_portfolio(assets, config),
        "projections": project_scenarios(assets, args.monthly, args.years, config),
        "currency": get_regional_config(config.region).currency,
        "warnings": check_contribution_limits(args.monthly, config.region),
    }

    if args.current_age is not None and args.retirement_age is not None:
        current = AssumptionSet(args.monthly, args.retirement_age)
        modified = AssumptionSet(
            monthly_contribution=args.what_if_monthly if args.what_if_monthly is not None else args.monthly,
            retirement_age=args.what_if_retirement_age or args.retirement_age,
            additional_investment=args.additional_investment,
        )
        results["what_if"] = compare_what_if(assets, current, modified, args.current_age, config)

    if args.monte_carlo:
        results["monte_carlo"] = run_monte_carlo(
            assets, args.monthly, args.years,
            retirement_goal=args.goal,
            n_simulations=args.simulations,
            seed=args.seed,
            config=config,
        )

    return results


def _print_tables(results: dict, currency: str, goal: Optional[float]) -> None:
    console.print_snapshot(results["snapshot"], currency)
    console.print_projections(results["projections"])
    if "what_if" in results:
        console.print_what_if(results["what_if"])
    if "monte_carlo" in results:
        console.print_monte_carlo(results["monte_carlo"], goal)
    for warning in results["warnings"]:
        print(f"\n⚠️  {warning}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        results = run(args)
    except (PortfolioEngineError, FileNotFoundError) as exc:
        logger.error(str(exc))
        print(f"❌ {exc}", file=sys.stderr)
        return 2

    if args.output:
        export_to_json(results, args.output)

    if args.json:
        print(json.dumps(to_serializable(results), indent=2))
    else:
        _print_tables(results, results["currency"], args.goal)
    return 0


if __name__ == "__main__":
    sys.exit(main())
