"""
Asset and correlation model
"""

from .correlation import CorrelationMatrix, plausible_correlation_matrix
from .universe import AssetUniverse, MarketSnapshot

__all__ = ['CorrelationMatrix', 'plausible_correlation_matrix', 'AssetUniverse', 'MarketSnapshot']
