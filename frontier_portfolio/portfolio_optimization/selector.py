from typing import Optional

from ..config import RISK_SLACK, RISK_TOLERANCE_BOUNDS
from ..exceptions import PortfolioValidationError
from ..models.portfolio import PortfolioPoint, EfficientFrontier


def _best_sharpe(points) -> PortfolioPoint:
    """Highest Sharpe ratio; the earliest point wins ties"""
    best = points[0]
    for point in points[1:]:
        if point.sharpe > best.sharpe:
            best = point
    return best


def _lowest_risk(points) -> PortfolioPoint:
    best = points[0]
    for point in points[1:]:
        if point.risk < best.risk:
            best = point
    return best


def select_optimal(frontier: EfficientFrontier, risk_tolerance: float) -> Optional[PortfolioPoint]:
    """
    Map a 0-100 risk tolerance to a frontier portfolio

    The tolerance interpolates a target risk between the frontier's minimum and
    maximum risk. Among points within 10% above that target, the best Sharpe
    ratio is chosen; with no such point the lowest-risk point is returned.
    """
    low, high = RISK_TOLERANCE_BOUNDS
    if not low <= risk_tolerance <= high:
        raise PortfolioValidationError(
            f"Risk tolerance must be between {low:g} and {high:g}, got {risk_tolerance}"
        )
    if frontier.is_empty:
        return None

    points = list(frontier)
    min_risk = min(p.risk for p in points)
    max_risk = max(p.risk for p in points)
    target_risk = min_risk + (risk_tolerance / 100) * (max_risk - min_risk)

    candidates = [p for p in points if p.risk <= target_risk * RISK_SLACK]
    if not candidates:
        return _lowest_risk(points)

    return _best_sharpe(candidates)


def max_sharpe_portfolio(frontier: EfficientFrontier) -> Optional[PortfolioPoint]:
    if frontier.is_empty:
        return None
    return _best_sharpe(list(frontier))


def min_variance_portfolio(frontier: EfficientFrontier) -> Optional[PortfolioPoint]:
    if frontier.is_empty:
        return None
    return _lowest_risk(list(frontier))
