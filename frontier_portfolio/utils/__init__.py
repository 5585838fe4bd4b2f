"""
Mathematical utilities and reporting helpers
"""

from .math_utils import (
    clamp,
    box_muller,
    order_statistic
)
from .allocation_utils import allocation_breakdown, generate_portfolio_report

__all__ = [
    'clamp',
    'box_muller',
    'order_statistic',
    'allocation_breakdown',
    'generate_portfolio_report'
]
