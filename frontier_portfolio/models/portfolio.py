from typing import Iterator, List, Optional, Sequence, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, field_validator


class PortfolioPoint(BaseModel):
    """Scored long-only portfolio; risk and expected return are in percent"""

    model_config = ConfigDict(frozen=True)

    weights: Tuple[float, ...]
    risk: float
    expected_return: float
    sharpe: float

    @field_validator('weights')
    @classmethod
    def validate_weights(cls, v):
        if any(w < 0.0 for w in v):
            raise ValueError("Weights must be non-negative")
        if v and abs(sum(v) - 1.0) > 1e-6:
            raise ValueError(f"Weights sum to {sum(v)}, not 1.0")
        return v

    @field_validator('risk')
    @classmethod
    def validate_risk(cls, v):
        if v < 0.0:
            raise ValueError("Risk cannot be negative")
        return v

    def weight_map(self, symbols: Sequence[str]) -> dict:
        """Weights keyed by symbol, in asset order"""
        if len(symbols) != len(self.weights):
            raise ValueError(f"Expected {len(self.weights)} symbols, got {len(symbols)}")
        return dict(zip(symbols, self.weights))


class EfficientFrontier:
    """
    Non-dominated portfolios sorted ascending by risk

    Expected return is strictly increasing along the sequence. Instances are
    rebuilt in full on every input change and never mutated.
    """

    def __init__(self, points: Sequence[PortfolioPoint], symbols: Sequence[str] = ()):
        self._points = tuple(points)
        self.symbols = tuple(symbols)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[PortfolioPoint]:
        return iter(self._points)

    def __getitem__(self, index) -> PortfolioPoint:
        return self._points[index]

    @property
    def is_empty(self) -> bool:
        return len(self._points) == 0

    @property
    def points(self) -> Tuple[PortfolioPoint, ...]:
        return self._points

    @property
    def risks(self) -> List[float]:
        return [p.risk for p in self._points]

    @property
    def returns(self) -> List[float]:
        return [p.expected_return for p in self._points]

    @property
    def min_risk(self) -> Optional[float]:
        return min(self.risks) if self._points else None

    @property
    def max_risk(self) -> Optional[float]:
        return max(self.risks) if self._points else None

    def to_dataframe(self) -> pd.DataFrame:
        """One row per frontier point with risk, return, sharpe and per-symbol weights"""
        columns = ['risk', 'expected_return', 'sharpe'] + list(self.symbols)
        rows = []
        for point in self._points:
            row = [point.risk, point.expected_return, point.sharpe]
            if self.symbols:
                row.extend(point.weights)
            rows.append(row)
        return pd.DataFrame(rows, columns=columns)

    def __repr__(self) -> str:
        return f"EfficientFrontier(points={len(self._points)}, symbols={list(self.symbols)})"
