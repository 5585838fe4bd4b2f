"""
Helper functions for presenting selected portfolios and simulation outcomes
"""

from typing import Dict, Optional, Sequence

from ..config import MIN_DISPLAY_WEIGHT_PCT
from ..models.portfolio import PortfolioPoint
from ..models.simulation import SimulationResult


def allocation_breakdown(portfolio: PortfolioPoint,
                         symbols: Sequence[str],
                         min_weight_pct: float = MIN_DISPLAY_WEIGHT_PCT) -> Dict[str, float]:
    """
    Percent allocation per symbol, rounded to 0.1%

    Positions at or below min_weight_pct are left out.
    """
    breakdown = {}
    for symbol, weight in portfolio.weight_map(symbols).items():
        pct = round(weight * 1000) / 10
        if pct > min_weight_pct:
            breakdown[symbol] = pct
    return breakdown


def generate_portfolio_report(symbols: Sequence[str],
                              selections: Dict[str, Optional[PortfolioPoint]],
                              simulation: Optional[SimulationResult] = None,
                              title: str = "Portfolio Optimization Summary") -> str:
    """Generate formatted report for selected portfolios and an optional projection"""

    report = []
    report.append("=" * 80)
    report.append(title.upper())
    report.append("=" * 80)

    report.append("\nSELECTED PORTFOLIOS:")
    report.append("-" * 80)
    report.append(f"{'Portfolio':<20} {'Return':<10} {'Risk':<10} {'Sharpe':<8} Allocation")
    report.append("-" * 80)

    for name, point in selections.items():
        if point is None:
            report.append(f"{name:<20} (frontier unavailable)")
            continue
        allocation = ", ".join(f"{s} {pct:.1f}%" for s, pct in allocation_breakdown(point, symbols).items())
        report.append(
            f"{name:<20} "
            f"{point.expected_return:<10.2f}"
            f"{point.risk:<10.2f}"
            f"{point.sharpe:<8.3f} "
            f"{allocation}"
        )

    if simulation is not None:
        stats = simulation.stats
        report.append(f"\nMONTE CARLO PROJECTION ({simulation.num_simulations:,} paths, {simulation.years} years):")
        report.append("-" * 40)
        report.append(f"{'Initial Investment':<30}: {simulation.initial_investment:>14,.2f}")
        report.append(f"{'Median Final Value':<30}: {stats.median_final:>14,.2f}")
        report.append(f"{'Mean Final Value':<30}: {stats.mean_final:>14,.2f}")
        report.append(f"{'Probability of Profit':<30}: {stats.probability_profit:>13.1f}%")
        report.append(f"{'Probability of Doubling':<30}: {stats.probability_doubling:>13.1f}%")
        report.append(f"{'Max Drawdown (sampled)':<30}: {stats.max_drawdown_percent:>13.1f}%")

    report.append("\n" + "=" * 80)

    return "\n".join(report)
