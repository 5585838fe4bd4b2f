"""
main.py
Efficient frontier sampling, risk-based selection and Monte Carlo projection

Usage:
    python main.py --risk-tolerance 50 --years 10 --simulations 1000 [--seed SEED]
"""

import argparse
import logging

import numpy as np

from frontier_portfolio import PortfolioAnalyzer, AssetUniverse, RiskProfileManager
from frontier_portfolio.config import (
    DEFAULT_RISK_FREE_RATE, DEFAULT_RISK_TOLERANCE, DEFAULT_YEARS,
    DEFAULT_NUM_SIMULATIONS, DEFAULT_INITIAL_INVESTMENT
)
from frontier_portfolio.utils import generate_portfolio_report


def print_assets(universe):
    """Print asset assumptions and correlations"""
    print("\n1) ASSETS")
    print("=" * 50)

    print(f"{'Symbol':<10} {'Return':<10} {'Volatility':<10}")
    print("-" * 50)
    for asset in universe.assets:
        print(f"{asset.symbol:<10} {asset.expected_return:<10.2f} {asset.volatility:<10.2f}")

    print("\nCorrelations:")
    print(universe.correlations.to_dataframe(universe.symbols).round(2))


def print_frontier(frontier):
    """Print frontier summary"""
    print("\n2) EFFICIENT FRONTIER")
    print("=" * 50)

    if frontier.is_empty:
        print("Need at least 2 assets for optimization")
        return

    print(f"Non-dominated portfolios: {len(frontier)}")
    print(f"Risk range: {frontier.min_risk:.2f}% - {frontier.max_risk:.2f}%")
    print(frontier.to_dataframe().round(3).head(10))


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--risk-tolerance", type=float, default=DEFAULT_RISK_TOLERANCE,
                    help="risk tolerance between 0 (conservative) and 100 (aggressive)")
    ap.add_argument("--risk-free-rate", type=float, default=DEFAULT_RISK_FREE_RATE,
                    help="risk-free rate in percent")
    ap.add_argument("--investment", type=float, default=DEFAULT_INITIAL_INVESTMENT,
                    help="initial investment")
    ap.add_argument("--years", type=int, default=DEFAULT_YEARS)
    ap.add_argument("--simulations", type=int, default=DEFAULT_NUM_SIMULATIONS)
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--seed", type=int, default=None,
                    help="optional PRNG seed for reproducibility")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    print("PORTFOLIO OPTIMIZER")
    print("=" * 50)

    universe = AssetUniverse.with_defaults()
    analyzer = PortfolioAnalyzer(universe, args.risk_free_rate, np.random.default_rng(args.seed))

    print_assets(universe)
    print_frontier(analyzer.frontier())

    label = RiskProfileManager.get_risk_label(args.risk_tolerance)
    print(f"\n3) RISK PROFILE: {label} ({args.risk_tolerance:g})")
    print("=" * 50)

    selections = {
        f"Selected ({label})": analyzer.select(args.risk_tolerance),
        "Max Sharpe": analyzer.max_sharpe(),
        "Min Variance": analyzer.min_variance(),
    }

    simulation = analyzer.simulate(args.risk_tolerance, args.investment, args.years,
                                   args.simulations, workers=args.workers)

    print(generate_portfolio_report(universe.symbols, selections, simulation))

    if simulation is not None:
        print("\n4) PERCENTILE BANDS")
        print("=" * 50)
        print(simulation.percentiles_dataframe().round(0))


if __name__ == "__main__":
    main()
