"""
Asset universe: the assets under consideration together with their correlation matrix
"""

import hashlib
import logging
import numbers
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..config import MIN_ASSETS, DEFAULT_CORRELATION, DEFAULT_ASSETS
from ..exceptions import DuplicateAssetError, MinimumAssetCountError, UnknownAssetError
from ..models.asset import Asset
from .correlation import CorrelationMatrix

logger = logging.getLogger(__name__)

AssetRef = Union[int, str]


class MarketSnapshot:
    """
    Immutable capture of assets and correlations

    Frontier sampling and simulation read from a snapshot so that edits made to
    the universe while a computation runs are never observed by it.
    """

    def __init__(self, assets: Sequence[Asset], correlations):
        self.assets: Tuple[Asset, ...] = tuple(assets)
        matrix = np.array(correlations, dtype=float)
        n = len(self.assets)
        if matrix.shape != (n, n):
            raise ValueError(f"Correlation matrix shape {matrix.shape} doesn't match {n} assets")
        matrix.flags.writeable = False
        self.correlations = matrix

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(a.symbol for a in self.assets)

    @property
    def returns(self) -> np.ndarray:
        return np.array([a.expected_return for a in self.assets], dtype=float)

    @property
    def volatilities(self) -> np.ndarray:
        return np.array([a.volatility for a in self.assets], dtype=float)

    def fingerprint(self) -> str:
        """Stable hash of the captured inputs, used as a cache key"""
        digest = hashlib.sha256()
        for asset in self.assets:
            digest.update(f"{asset.symbol}|{asset.expected_return!r}|{asset.volatility!r};".encode())
        digest.update(np.ascontiguousarray(self.correlations).tobytes())
        return digest.hexdigest()

    def __len__(self) -> int:
        return len(self.assets)


class AssetUniverse:
    """Ordered, uniquely-symbolled assets and their pairwise correlations"""

    def __init__(self, assets: Optional[Sequence[Asset]] = None,
                 default_correlation: float = DEFAULT_CORRELATION):
        self._assets: List[Asset] = []
        self.correlations = CorrelationMatrix(0, default_correlation)
        for asset in assets or []:
            self._append(asset)

    @classmethod
    def with_defaults(cls) -> 'AssetUniverse':
        """Starter universe used by the optimizer panel"""
        return cls([Asset(**params) for params in DEFAULT_ASSETS])

    @property
    def assets(self) -> Tuple[Asset, ...]:
        return tuple(self._assets)

    @property
    def symbols(self) -> List[str]:
        return [a.symbol for a in self._assets]

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, symbol: str) -> bool:
        return self._find(symbol) is not None

    def _find(self, symbol: str) -> Optional[int]:
        if not isinstance(symbol, str):
            return None
        key = symbol.strip().upper()
        for idx, asset in enumerate(self._assets):
            if asset.symbol == key:
                return idx
        return None

    def index_of(self, symbol: str) -> int:
        idx = self._find(symbol)
        if idx is None:
            raise UnknownAssetError(symbol)
        return idx

    def _resolve(self, ref: AssetRef) -> int:
        if isinstance(ref, numbers.Integral) and not isinstance(ref, bool):
            return int(ref)
        return self.index_of(ref)

    def _append(self, asset: Asset):
        if self._find(asset.symbol) is not None:
            raise DuplicateAssetError(asset.symbol)
        self._assets.append(asset)
        self.correlations.resize(len(self._assets))

    def add_asset(self, symbol: str, expected_return: float, volatility: float) -> Asset:
        asset = Asset(symbol=symbol, expected_return=expected_return, volatility=volatility)
        self._append(asset)
        logger.debug("Added %s (return %.2f%%, vol %.2f%%)", asset.symbol,
                     asset.expected_return, asset.volatility)
        return asset

    def remove_asset(self, symbol: str) -> Asset:
        idx = self.index_of(symbol)
        if len(self._assets) - 1 < MIN_ASSETS:
            raise MinimumAssetCountError(MIN_ASSETS)
        removed = self._assets.pop(idx)
        # Drop the removed row and column rather than resize(), which would shift
        # later assets onto the removed asset's correlations.
        self.correlations.remove_index(idx)
        logger.debug("Removed %s", removed.symbol)
        return removed

    def edit_asset(self, symbol: str, expected_return: Optional[float] = None,
                   volatility: Optional[float] = None) -> Asset:
        """Replace an asset's return and/or volatility; correlations are unchanged"""
        idx = self.index_of(symbol)
        current = self._assets[idx]
        updated = Asset(
            symbol=current.symbol,
            expected_return=current.expected_return if expected_return is None else expected_return,
            volatility=current.volatility if volatility is None else volatility,
        )
        self._assets[idx] = updated
        return updated

    def set_correlation(self, first: AssetRef, second: AssetRef, value: float) -> float:
        return self.correlations.set(self._resolve(first), self._resolve(second), value)

    def get_correlation(self, first: AssetRef, second: AssetRef) -> float:
        return self.correlations.get(self._resolve(first), self._resolve(second))

    def import_correlations(self, matrix):
        """Bulk-replace the matrix with externally sourced correlations"""
        self.correlations.replace(matrix)
        logger.info("Imported correlations for %d assets", len(self._assets))

    def snapshot(self) -> MarketSnapshot:
        return MarketSnapshot(self._assets, self.correlations.to_array())

    def __repr__(self) -> str:
        return f"AssetUniverse(symbols={self.symbols})"
