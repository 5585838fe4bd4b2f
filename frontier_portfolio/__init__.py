"""
Portfolio Construction and Risk Simulation

This package approximates the efficient frontier of a set of assets by random
portfolio sampling, selects a portfolio for a 0-100 risk tolerance, and projects
the selected portfolio forward with a Monte Carlo model to produce percentile
bands and summary risk statistics.

Pipeline:
    AssetUniverse -> MarketSnapshot -> EfficientFrontier -> PortfolioPoint -> SimulationResult
"""

import logging
import threading
from collections import OrderedDict
from typing import Callable, Optional, Sequence

import numpy as np

from .config import DEFAULT_RISK_FREE_RATE
from .exceptions import (
    PortfolioValidationError,
    DuplicateAssetError,
    MinimumAssetCountError,
    UnknownAssetError,
    CorrelationImportError,
    SimulationCancelledError
)
from .market import AssetUniverse, MarketSnapshot, CorrelationMatrix, plausible_correlation_matrix
from .models import Asset, PortfolioPoint, EfficientFrontier, SimulationConfig, SimulationResult
from .portfolio_optimization import (
    FrontierSampler,
    compute_frontier,
    select_optimal,
    max_sharpe_portfolio,
    min_variance_portfolio,
    RiskProfileManager
)
from .simulation import MonteCarloSimulator, run_monte_carlo, build_config

__version__ = "0.1.0"
__author__ = "Your Name"

logger = logging.getLogger(__name__)

CorrelationSource = Callable[[Sequence[str]], object]


class CorrelationImportOutcome:
    """Result of an import attempt; a fallback is a notice for the user, not an error"""

    def __init__(self, used_fallback: bool, notice: Optional[str] = None):
        self.used_fallback = used_fallback
        self.notice = notice

    def __repr__(self) -> str:
        return f"CorrelationImportOutcome(used_fallback={self.used_fallback}, notice={self.notice!r})"


class PortfolioAnalyzer:
    """
    Main interface for frontier construction, selection and simulation

    Derived results are recomputed explicitly by the caller whenever inputs change.
    Frontiers are cached per instance, keyed by a hash of the asset/correlation
    snapshot and the risk-free rate. Simulations are never cached.

    An analyzer may be shared between threads: the frontier cache and the shared
    generator are guarded by a lock, and each simulation runs on its own child
    generator outside the lock.
    """

    CACHE_SIZE = 8

    def __init__(self,
                 universe: Optional[AssetUniverse] = None,
                 risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
                 rng: Optional[np.random.Generator] = None):
        self.universe = universe if universe is not None else AssetUniverse.with_defaults()
        self.risk_free_rate = risk_free_rate
        self.rng = rng if rng is not None else np.random.default_rng()
        self._frontiers = OrderedDict()
        self._lock = threading.RLock()

    def frontier(self) -> EfficientFrontier:
        """Efficient frontier for the current inputs"""
        snapshot = self.universe.snapshot()
        key = (snapshot.fingerprint(), float(self.risk_free_rate))

        with self._lock:
            if key in self._frontiers:
                self._frontiers.move_to_end(key)
                return self._frontiers[key]

            frontier = FrontierSampler(rng=self.rng).compute(snapshot, key[1])
            self._frontiers[key] = frontier
            if len(self._frontiers) > self.CACHE_SIZE:
                self._frontiers.popitem(last=False)
            return frontier

    def invalidate(self):
        """Drop cached frontiers so the next request resamples"""
        with self._lock:
            self._frontiers.clear()

    def select(self, risk_tolerance: float) -> Optional[PortfolioPoint]:
        return select_optimal(self.frontier(), risk_tolerance)

    def max_sharpe(self) -> Optional[PortfolioPoint]:
        return max_sharpe_portfolio(self.frontier())

    def min_variance(self) -> Optional[PortfolioPoint]:
        return min_variance_portfolio(self.frontier())

    def simulate(self,
                 risk_tolerance: float,
                 initial_investment: float,
                 years: int,
                 num_simulations: int,
                 **options) -> Optional[SimulationResult]:
        """Project the portfolio selected for risk_tolerance; None without a frontier"""
        portfolio = self.select(risk_tolerance)
        if portfolio is None:
            return None
        with self._lock:
            rng = self.rng.spawn(1)[0]
        return run_monte_carlo(portfolio, initial_investment, years, num_simulations,
                               rng=rng, **options)

    def import_correlations(self, source: CorrelationSource) -> CorrelationImportOutcome:
        """
        Replace correlations from an external source

        Any failure of the source falls back to a synthetic moderate-correlation
        matrix; the outcome carries a notice to show the user.
        """
        symbols = self.universe.symbols
        try:
            self.universe.import_correlations(source(symbols))
            return CorrelationImportOutcome(used_fallback=False)
        except Exception as e:
            logger.warning("Correlation import failed (%s), using generated correlations", e)
            with self._lock:
                fallback = plausible_correlation_matrix(len(symbols), self.rng)
            self.universe.import_correlations(fallback)
            return CorrelationImportOutcome(
                used_fallback=True,
                notice=f"Could not import correlations ({e}); using estimated values instead"
            )


__all__ = [
    'PortfolioAnalyzer',
    'CorrelationImportOutcome',
    'Asset',
    'AssetUniverse',
    'MarketSnapshot',
    'CorrelationMatrix',
    'plausible_correlation_matrix',
    'PortfolioPoint',
    'EfficientFrontier',
    'SimulationConfig',
    'SimulationResult',
    'FrontierSampler',
    'compute_frontier',
    'select_optimal',
    'max_sharpe_portfolio',
    'min_variance_portfolio',
    'RiskProfileManager',
    'MonteCarloSimulator',
    'run_monte_carlo',
    'build_config',
    'PortfolioValidationError',
    'DuplicateAssetError',
    'MinimumAssetCountError',
    'UnknownAssetError',
    'CorrelationImportError',
    'SimulationCancelledError',
]
