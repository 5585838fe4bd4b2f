"""
Data models for assets, scored portfolios and simulation results
"""

from .asset import Asset
from .portfolio import PortfolioPoint, EfficientFrontier
from .simulation import SimulationConfig, PercentileBand, SimulationStats, SimulationResult

__all__ = [
    'Asset',
    'PortfolioPoint',
    'EfficientFrontier',
    'SimulationConfig',
    'PercentileBand',
    'SimulationStats',
    'SimulationResult',
]
