"""
Monte Carlo forward simulation of a single portfolio's value.

Each simulated path compounds annual returns drawn from a Gaussian model with the
portfolio's expected return and volatility. Paths are independent of each other,
so simulations are generated in batches, each with its own child random generator,
and merged only for the final percentile and statistics reduction.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

import numpy as np
from pydantic import ValidationError

from ..config import PATH_SAMPLE_LIMIT, DRAWDOWN_SAMPLE_SIZE, DEFAULT_BATCH_SIZE
from ..exceptions import PortfolioValidationError, SimulationCancelledError
from ..models.portfolio import PortfolioPoint
from ..models.simulation import SimulationConfig, SimulationResult
from ..utils.math_utils import box_muller
from .reduction import percentile_bands, final_value_stats

logger = logging.getLogger(__name__)


def _simulate_batch(rng: np.random.Generator,
                    annual_return: float,
                    annual_volatility: float,
                    initial_investment: float,
                    years: int,
                    count: int) -> np.ndarray:
    """(count × years+1) value paths; values are floored at zero"""
    paths = np.empty((count, years + 1), dtype=float)
    paths[:, 0] = initial_investment

    z = box_muller(rng, (count, years))
    for year in range(years):
        year_return = annual_return + annual_volatility * z[:, year]
        paths[:, year + 1] = np.maximum(0.0, paths[:, year] * (1.0 + year_return))

    return paths


class MonteCarloSimulator:
    """
    Forward simulator for a selected portfolio.

    Example:
        >>> config = SimulationConfig(initial_investment=100000, years=10, num_simulations=1000)
        >>> simulator = MonteCarloSimulator(config)
        >>> result = simulator.run(portfolio)
        >>> print(f"Median outcome: {result.stats.median_final:,.0f}")

    The generator defaults to an unseeded ``numpy.random.default_rng()`` so that
    runs are independent; pass a seeded generator for reproducible output.
    """

    def __init__(self,
                 config: Optional[SimulationConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

    def run(self,
            portfolio: PortfolioPoint,
            config: Optional[SimulationConfig] = None,
            cancel_event: Optional[threading.Event] = None) -> SimulationResult:
        """Simulate the portfolio and reduce the paths.

        Args:
            portfolio: Frontier point supplying the annual return and risk (percent)
            config: Overrides the simulator's configuration for this run
            cancel_event: When set during the run, the run is abandoned

        Raises:
            SimulationCancelledError: If cancel_event fires before reduction
        """
        config = config or self.config
        if config is None:
            raise PortfolioValidationError("No simulation configuration supplied")

        annual_return = portfolio.expected_return / 100
        annual_volatility = portfolio.risk / 100

        batch_sizes = self._batch_sizes(config.num_simulations, config.batch_size)
        child_rngs = self.rng.spawn(len(batch_sizes))

        def simulate(args):
            rng, count = args
            if cancel_event is not None and cancel_event.is_set():
                raise SimulationCancelledError("Simulation cancelled")
            return _simulate_batch(rng, annual_return, annual_volatility,
                                   config.initial_investment, config.years, count)

        jobs = list(zip(child_rngs, batch_sizes))
        if config.workers > 1 and len(jobs) > 1:
            with ThreadPoolExecutor(max_workers=config.workers) as executor:
                batches = list(executor.map(simulate, jobs))
        else:
            batches = [simulate(job) for job in jobs]

        if cancel_event is not None and cancel_event.is_set():
            raise SimulationCancelledError("Simulation cancelled")

        paths = np.vstack(batches)
        result = SimulationResult(
            paths=paths[:config.path_sample_limit].tolist(),
            percentiles=percentile_bands(paths),
            stats=final_value_stats(paths, config.initial_investment, config.drawdown_sample_size),
            initial_investment=config.initial_investment,
            years=config.years,
            num_simulations=config.num_simulations,
        )

        logger.info("Simulated %d paths over %d years: median final %.2f, profit probability %.1f%%",
                    config.num_simulations, config.years,
                    result.stats.median_final, result.stats.probability_profit)
        return result

    def compare(self,
                portfolios: Dict[str, PortfolioPoint],
                config: Optional[SimulationConfig] = None) -> Dict[str, SimulationResult]:
        """Run the same projection for several named portfolios side by side"""
        return {name: self.run(portfolio, config) for name, portfolio in portfolios.items()}

    @staticmethod
    def _batch_sizes(total: int, batch_size: int) -> List[int]:
        full, remainder = divmod(total, batch_size)
        sizes = [batch_size] * full
        if remainder:
            sizes.append(remainder)
        return sizes


def build_config(initial_investment: float,
                 years: int,
                 num_simulations: int,
                 path_sample_limit: int = PATH_SAMPLE_LIMIT,
                 drawdown_sample_size: int = DRAWDOWN_SAMPLE_SIZE,
                 workers: int = 1,
                 batch_size: int = DEFAULT_BATCH_SIZE) -> SimulationConfig:
    """Validated SimulationConfig; invalid values raise PortfolioValidationError"""
    try:
        return SimulationConfig(
            initial_investment=initial_investment,
            years=years,
            num_simulations=num_simulations,
            path_sample_limit=path_sample_limit,
            drawdown_sample_size=drawdown_sample_size,
            workers=workers,
            batch_size=batch_size,
        )
    except ValidationError as e:
        raise PortfolioValidationError(str(e)) from e


def run_monte_carlo(portfolio: PortfolioPoint,
                    initial_investment: float,
                    years: int,
                    num_simulations: int,
                    rng: Optional[np.random.Generator] = None,
                    *,
                    path_sample_limit: int = PATH_SAMPLE_LIMIT,
                    drawdown_sample_size: int = DRAWDOWN_SAMPLE_SIZE,
                    workers: int = 1,
                    batch_size: int = DEFAULT_BATCH_SIZE,
                    cancel_event: Optional[threading.Event] = None) -> SimulationResult:
    """Simulate a selected portfolio's value over time"""
    config = build_config(initial_investment, years, num_simulations,
                          path_sample_limit, drawdown_sample_size, workers, batch_size)
    return MonteCarloSimulator(config, rng).run(portfolio, cancel_event=cancel_event)
