"""
Monte Carlo forward simulation of portfolio value
"""

from .monte_carlo import MonteCarloSimulator, run_monte_carlo, build_config
from .reduction import percentile_bands, final_value_stats, max_drawdown_percent

__all__ = [
    'MonteCarloSimulator',
    'run_monte_carlo',
    'build_config',
    'percentile_bands',
    'final_value_stats',
    'max_drawdown_percent',
]
