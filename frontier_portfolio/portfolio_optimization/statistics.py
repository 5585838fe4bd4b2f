"""
Portfolio statistics from weights, asset returns, volatilities and correlations

Returns and volatilities are expressed in percent. Volatilities are converted to
fractions before forming the variance; the resulting risk is re-expressed in percent.
Positive semidefiniteness of the correlation matrix is not checked, so a negative
variance is clamped to zero.
"""

from typing import Sequence, Tuple

import numpy as np


def portfolio_return(weights: Sequence[float], returns: Sequence[float]) -> float:
    """Weighted sum of asset expected returns (percent)"""
    return float(np.dot(np.asarray(weights, dtype=float), np.asarray(returns, dtype=float)))


def portfolio_variance(weights: Sequence[float], volatilities: Sequence[float], correlations) -> float:
    """
    Σ_i Σ_j w_i w_j σ_i σ_j ρ_ij with σ as fractions of 1
    """
    scaled = np.asarray(weights, dtype=float) * (np.asarray(volatilities, dtype=float) / 100)
    return float(scaled @ np.asarray(correlations, dtype=float) @ scaled)


def portfolio_risk(weights: Sequence[float], volatilities: Sequence[float], correlations) -> float:
    """Portfolio volatility in percent; never negative"""
    variance = portfolio_variance(weights, volatilities, correlations)
    return float(np.sqrt(max(0.0, variance)) * 100)


def sharpe_ratio(expected_return: float, risk: float, risk_free_rate: float) -> float:
    """Excess return per unit of risk; zero when risk is zero"""
    if risk > 0:
        return (expected_return - risk_free_rate) / risk
    return 0.0


def score_portfolios(weight_matrix: np.ndarray,
                     returns: Sequence[float],
                     volatilities: Sequence[float],
                     correlations,
                     risk_free_rate: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Batch form of the statistics above

    Args:
        weight_matrix: (k × n) array, one weight vector per row

    Returns:
        Tuple of (risk, return, sharpe) arrays of length k
    """
    weights = np.atleast_2d(np.asarray(weight_matrix, dtype=float))
    scaled = weights * (np.asarray(volatilities, dtype=float) / 100)
    corr = np.asarray(correlations, dtype=float)

    expected = weights @ np.asarray(returns, dtype=float)
    variance = np.einsum('ki,ij,kj->k', scaled, corr, scaled)
    risk = np.sqrt(np.maximum(0.0, variance)) * 100

    sharpe = np.zeros_like(risk)
    positive = risk > 0
    sharpe[positive] = (expected[positive] - risk_free_rate) / risk[positive]

    return risk, expected, sharpe
