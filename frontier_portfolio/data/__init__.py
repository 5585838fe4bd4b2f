"""
Correlation data import
"""

from .loader import CorrelationLoader

__all__ = ['CorrelationLoader']
