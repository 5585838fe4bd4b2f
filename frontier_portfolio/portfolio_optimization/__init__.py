"""
Portfolio statistics, sampled efficient frontier and risk-based selection
"""

from .statistics import (
    portfolio_return,
    portfolio_variance,
    portfolio_risk,
    sharpe_ratio,
    score_portfolios
)
from .frontier import FrontierSampler, compute_frontier
from .selector import select_optimal, max_sharpe_portfolio, min_variance_portfolio
from .risk_profiles import RiskProfileManager

__all__ = [
    'portfolio_return',
    'portfolio_variance',
    'portfolio_risk',
    'sharpe_ratio',
    'score_portfolios',
    'FrontierSampler',
    'compute_frontier',
    'select_optimal',
    'max_sharpe_portfolio',
    'min_variance_portfolio',
    'RiskProfileManager'
]
