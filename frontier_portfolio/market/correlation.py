"""
Symmetric asset correlation matrix with clamped entries and a fixed unit diagonal
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from ..config import DEFAULT_CORRELATION, CORRELATION_BOUNDS, FALLBACK_CORRELATION_RANGE
from ..exceptions import CorrelationImportError, PortfolioValidationError
from ..utils.math_utils import clamp

logger = logging.getLogger(__name__)


class CorrelationMatrix:
    """
    Square correlation matrix indexed by asset position

    Invariants held after every operation:
    - M[i][i] == 1
    - M[i][j] == M[j][i]
    - every off-diagonal entry lies in [-1, 1]
    """

    def __init__(self, size: int, default: float = DEFAULT_CORRELATION):
        if size < 0:
            raise PortfolioValidationError(f"Matrix size cannot be negative: {size}")
        self.default = clamp(default, *CORRELATION_BOUNDS)
        self._matrix = np.full((size, size), self.default, dtype=float)
        np.fill_diagonal(self._matrix, 1.0)

    @classmethod
    def from_array(cls, matrix, default: float = DEFAULT_CORRELATION) -> 'CorrelationMatrix':
        """Build from an existing square array, normalizing it like an import"""
        array = np.asarray(matrix, dtype=float)
        instance = cls(array.shape[0] if array.ndim == 2 else 0, default)
        instance.replace(array)
        return instance

    @property
    def size(self) -> int:
        return self._matrix.shape[0]

    def __len__(self) -> int:
        return self.size

    def _check_index(self, i: int, j: int):
        n = self.size
        if not (0 <= i < n and 0 <= j < n):
            raise PortfolioValidationError(f"Correlation index ({i}, {j}) out of range for {n} assets")

    def get(self, i: int, j: int) -> float:
        self._check_index(i, j)
        return float(self._matrix[i, j])

    def set(self, i: int, j: int, value: float) -> float:
        """Write a clamped value to both M[i][j] and M[j][i]; returns the stored value"""
        self._check_index(i, j)
        if i == j:
            logger.warning("Ignoring write to diagonal entry (%d, %d); diagonal is fixed at 1", i, j)
            return 1.0
        if value is None or math.isnan(value):
            raise PortfolioValidationError("Correlation must be a number")

        stored = clamp(float(value), *CORRELATION_BOUNDS)
        if stored != value:
            logger.debug("Clamped correlation (%d, %d) from %s to %s", i, j, value, stored)
        self._matrix[i, j] = stored
        self._matrix[j, i] = stored
        return stored

    def resize(self, size: int):
        """
        Change the asset count

        Entries whose index pair still exists are preserved; new pairs take the default.
        Only suited to growing or truncating at the end; removing an asset from the
        middle goes through remove_index so pairs stay attached to their assets.
        """
        if size < 0:
            raise PortfolioValidationError(f"Matrix size cannot be negative: {size}")
        resized = np.full((size, size), self.default, dtype=float)
        keep = min(size, self.size)
        resized[:keep, :keep] = self._matrix[:keep, :keep]
        np.fill_diagonal(resized, 1.0)
        self._matrix = resized

    def remove_index(self, index: int):
        """Drop the row and column of a removed asset"""
        self._check_index(index, index)
        self._matrix = np.delete(np.delete(self._matrix, index, axis=0), index, axis=1)

    def replace(self, matrix):
        """
        Bulk-replace every entry, as done by a correlation import

        The upper triangle is authoritative: it is clamped and mirrored onto the
        lower triangle, and the diagonal is forced to 1.
        """
        array = np.array(matrix, dtype=float)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise CorrelationImportError(f"Correlation matrix must be square, got shape {array.shape}")
        if array.shape[0] != self.size:
            raise CorrelationImportError(
                f"Correlation matrix shape {array.shape} doesn't match {self.size} assets"
            )
        if np.isnan(array).any():
            raise CorrelationImportError("Correlation matrix contains missing values")

        low, high = CORRELATION_BOUNDS
        if (array < low).any() or (array > high).any():
            logger.warning("Imported correlations outside [%s, %s] were clamped", low, high)

        upper = np.triu(np.clip(array, low, high), k=1)
        normalized = upper + upper.T
        np.fill_diagonal(normalized, 1.0)
        self._matrix = normalized

    def to_array(self) -> np.ndarray:
        """Read-only copy of the current entries"""
        snapshot = self._matrix.copy()
        snapshot.flags.writeable = False
        return snapshot

    def to_dataframe(self, symbols: Sequence[str]) -> pd.DataFrame:
        if len(symbols) != self.size:
            raise ValueError(f"Expected {self.size} symbols, got {len(symbols)}")
        return pd.DataFrame(self._matrix.copy(), index=list(symbols), columns=list(symbols))

    def __repr__(self) -> str:
        return f"CorrelationMatrix(size={self.size})"


def plausible_correlation_matrix(n: int,
                                 rng: Optional[np.random.Generator] = None,
                                 low: float = FALLBACK_CORRELATION_RANGE[0],
                                 high: float = FALLBACK_CORRELATION_RANGE[1]) -> np.ndarray:
    """
    Synthetic moderate-correlation matrix used when an import fails

    Off-diagonal entries are uniform in [low, high], mirrored for symmetry.
    """
    rng = rng if rng is not None else np.random.default_rng()
    upper = np.triu(rng.uniform(low, high, size=(n, n)), k=1)
    matrix = upper + upper.T
    np.fill_diagonal(matrix, 1.0)
    return matrix
