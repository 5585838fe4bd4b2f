"""
Reduction of simulated value paths to percentile bands and final-value statistics

Paths are a (simulations × years+1) array whose first column is the initial
investment. Percentiles are order statistics taken at index floor(N * p).
"""

from typing import List

import numpy as np

from ..config import PERCENTILE_LEVELS
from ..models.simulation import PercentileBand, SimulationStats
from ..utils.math_utils import order_statistic


def percentile_bands(paths: np.ndarray) -> List[PercentileBand]:
    """One band per year (including year 0) across all simulations"""
    n_sims, n_points = paths.shape
    sorted_by_year = np.sort(paths, axis=0)

    bands = []
    for year in range(n_points):
        column = sorted_by_year[:, year]
        levels = {name: order_statistic(column, p) for name, p in PERCENTILE_LEVELS.items()}
        bands.append(PercentileBand(year=year, **levels))
    return bands


def max_drawdown_percent(paths: np.ndarray, sample_size: int) -> float:
    """
    Largest peak-to-trough decline, in percent, across the first sample_size paths

    Only a bounded sample is scanned; the remaining paths do not contribute.
    """
    sample = paths[:sample_size]
    if sample.size == 0:
        return 0.0
    peaks = np.maximum.accumulate(sample, axis=1)
    with np.errstate(divide='ignore', invalid='ignore'):
        drawdowns = np.where(peaks > 0.0, (peaks - sample) / peaks, 0.0)
    return float(drawdowns.max() * 100)


def final_value_stats(paths: np.ndarray, initial_investment: float,
                      drawdown_sample_size: int) -> SimulationStats:
    finals = paths[:, -1]
    sorted_finals = np.sort(finals)
    n = len(finals)

    return SimulationStats(
        median_final=order_statistic(sorted_finals, 0.5),
        mean_final=float(np.mean(finals)),
        probability_profit=float(np.count_nonzero(finals > initial_investment) / n * 100),
        probability_doubling=float(np.count_nonzero(finals > 2 * initial_investment) / n * 100),
        max_drawdown_percent=max_drawdown_percent(paths, drawdown_sample_size),
        p5_final=order_statistic(sorted_finals, 0.05),
        p95_final=order_statistic(sorted_finals, 0.95),
        min_final=float(sorted_finals[0]),
        max_final=float(sorted_finals[-1]),
    )
