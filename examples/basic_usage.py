"""
Basic usage example for the frontier_portfolio package

Shows simple workflow for:
1. Building an asset universe and setting correlations
2. Sampling the efficient frontier and selecting portfolios
3. Projecting the selected portfolio with Monte Carlo simulation
"""

from frontier_portfolio import AssetUniverse, PortfolioAnalyzer, RiskProfileManager
from frontier_portfolio.utils import allocation_breakdown


def basic_example():
    """Simple example of package usage"""

    print("Basic Portfolio Optimization Example")
    print("="*50)

    # Step 1: Define assets
    universe = AssetUniverse()
    universe.add_asset("SPY", expected_return=10.0, volatility=18.0)
    universe.add_asset("AGG", expected_return=4.0, volatility=6.0)
    universe.add_asset("GLD", expected_return=6.0, volatility=15.0)

    universe.set_correlation("SPY", "AGG", 0.1)
    universe.set_correlation("SPY", "GLD", 0.05)
    universe.set_correlation("AGG", "GLD", 0.3)

    # Step 2: Frontier and distinguished portfolios
    analyzer = PortfolioAnalyzer(universe, risk_free_rate=4.5)
    frontier = analyzer.frontier()
    print(f"\nFrontier points: {len(frontier)}")

    for name, point in [("Max Sharpe", analyzer.max_sharpe()), ("Min Variance", analyzer.min_variance())]:
        print(f"\n{name}:")
        print(f"  Return: {point.expected_return:.2f}%  Risk: {point.risk:.2f}%  Sharpe: {point.sharpe:.3f}")
        for symbol, pct in allocation_breakdown(point, universe.symbols).items():
            print(f"    {symbol}: {pct:.1f}%")

    # Step 3: Compare risk profiles
    print("\nPortfolios by risk profile:")
    for profile in RiskProfileManager.get_all_profiles():
        point = analyzer.select(profile["risk_tolerance"])
        print(f"  {profile['name']:<14}: return {point.expected_return:.2f}%, risk {point.risk:.2f}%")

    # Step 4: Monte Carlo projection
    result = analyzer.simulate(risk_tolerance=50, initial_investment=100_000, years=20, num_simulations=2000)
    stats = result.stats
    print("\nMonte Carlo projection (20 years):")
    print(f"  Median final value: {stats.median_final:,.0f}")
    print(f"  Probability of profit: {stats.probability_profit:.1f}%")
    print(f"  Probability of doubling: {stats.probability_doubling:.1f}%")
    print(f"  Max drawdown (sampled paths): {stats.max_drawdown_percent:.1f}%")


if __name__ == "__main__":
    basic_example()
