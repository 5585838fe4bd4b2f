import numpy as np
from typing import Sequence


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to the closed interval [low, high]"""
    return max(low, min(high, value))


def box_muller(rng: np.random.Generator, size=None) -> np.ndarray:
    """
    Standard normal variates from pairs of uniform draws

    z = sqrt(-2 ln u1) * cos(2π u2)

    u1 is taken from (0, 1] so the logarithm is always defined.
    """
    u1 = 1.0 - rng.random(size)
    u2 = rng.random(size)
    return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)


def order_statistic(sorted_values: Sequence[float], p: float) -> float:
    """Value at index floor(n * p) of an ascending sequence, capped at the last element"""
    n = len(sorted_values)
    if n == 0:
        raise ValueError("Cannot take an order statistic of an empty sequence")
    idx = min(int(np.floor(n * p)), n - 1)
    return float(sorted_values[idx])
