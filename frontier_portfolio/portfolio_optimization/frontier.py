import logging
from typing import Optional, Sequence

import numpy as np

from ..config import MIN_ASSETS, FRONTIER_SAMPLES, DEFAULT_RISK_FREE_RATE
from ..market.universe import MarketSnapshot
from ..models.asset import Asset
from ..models.portfolio import PortfolioPoint, EfficientFrontier
from .statistics import score_portfolios

logger = logging.getLogger(__name__)


class FrontierSampler:
    """
    Efficient frontier approximation by random portfolio sampling

    Draws random long-only weight vectors, scores them, and keeps the points
    whose return beats every lower-risk point:
    - each weight vector is n i.i.d. uniform(0, 1) draws divided by their sum
      (not uniform over the simplex; the resulting coverage bias is accepted)
    - points are sorted ascending by risk
    - a point is kept only if its return strictly exceeds the running maximum

    The sampler never reuses earlier results; each call resamples from scratch.
    """

    def __init__(self,
                 num_samples: int = FRONTIER_SAMPLES,
                 rng: Optional[np.random.Generator] = None):
        if num_samples < 1:
            raise ValueError("num_samples must be at least 1")
        self.num_samples = num_samples
        self.rng = rng if rng is not None else np.random.default_rng()

    def sample_weights(self, n_assets: int) -> np.ndarray:
        """(num_samples × n_assets) matrix of normalized random weights"""
        raw = self.rng.random((self.num_samples, n_assets))
        return raw / raw.sum(axis=1, keepdims=True)

    def compute(self, snapshot: MarketSnapshot,
                risk_free_rate: float = DEFAULT_RISK_FREE_RATE) -> EfficientFrontier:
        n = len(snapshot)
        if n < MIN_ASSETS:
            logger.debug("Frontier not computed: %d asset(s), need %d", n, MIN_ASSETS)
            return EfficientFrontier([], snapshot.symbols)

        weights = self.sample_weights(n)
        risk, expected, sharpe = score_portfolios(
            weights, snapshot.returns, snapshot.volatilities,
            snapshot.correlations, risk_free_rate
        )

        order = np.argsort(risk, kind='stable')

        points = []
        max_return = -np.inf
        for idx in order:
            if expected[idx] > max_return:
                points.append(PortfolioPoint(
                    weights=tuple(float(w) for w in weights[idx]),
                    risk=float(risk[idx]),
                    expected_return=float(expected[idx]),
                    sharpe=float(sharpe[idx])
                ))
                max_return = expected[idx]

        logger.debug("Frontier: %d of %d sampled portfolios non-dominated", len(points), self.num_samples)
        return EfficientFrontier(points, snapshot.symbols)


def compute_frontier(assets: Sequence[Asset],
                     correlation_matrix,
                     risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
                     rng: Optional[np.random.Generator] = None,
                     num_samples: int = FRONTIER_SAMPLES) -> EfficientFrontier:
    """Sample the efficient frontier for the given assets and correlations"""
    snapshot = MarketSnapshot(assets, correlation_matrix)
    return FrontierSampler(num_samples, rng).compute(snapshot, risk_free_rate)
