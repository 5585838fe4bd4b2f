from typing import List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..config import (
    SIMULATIONS_RANGE, YEARS_RANGE, PATH_SAMPLE_LIMIT,
    DRAWDOWN_SAMPLE_SIZE, DEFAULT_BATCH_SIZE
)


class SimulationConfig(BaseModel):
    """Parameters for one Monte Carlo projection run"""

    initial_investment: float
    years: int
    num_simulations: int
    path_sample_limit: int = PATH_SAMPLE_LIMIT
    drawdown_sample_size: int = DRAWDOWN_SAMPLE_SIZE
    workers: int = 1
    batch_size: int = DEFAULT_BATCH_SIZE

    @field_validator('initial_investment')
    @classmethod
    def validate_investment(cls, v):
        if not v > 0.0:
            raise ValueError(f"Initial investment must be positive, got {v}")
        return v

    @field_validator('years')
    @classmethod
    def validate_years(cls, v):
        low, high = YEARS_RANGE
        if v < low or v > high:
            raise ValueError(f"Years must be between {low} and {high}, got {v}")
        return v

    @field_validator('num_simulations')
    @classmethod
    def validate_num_simulations(cls, v):
        low, high = SIMULATIONS_RANGE
        if v < low or v > high:
            raise ValueError(f"Number of simulations must be between {low} and {high}, got {v}")
        return v

    @field_validator('path_sample_limit', 'drawdown_sample_size')
    @classmethod
    def validate_sample_sizes(cls, v):
        if v < 0:
            raise ValueError("Sample sizes cannot be negative")
        return v

    @field_validator('workers', 'batch_size')
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("Workers and batch size must be at least 1")
        return v


class PercentileBand(BaseModel):
    """Portfolio value order statistics across all simulations for one year"""

    model_config = ConfigDict(frozen=True)

    year: int
    p10: float
    p25: float
    p50: float
    p75: float
    p90: float


class SimulationStats(BaseModel):
    """Final-value summary; probabilities are percentages"""

    model_config = ConfigDict(frozen=True)

    median_final: float
    mean_final: float
    probability_profit: float
    probability_doubling: float
    max_drawdown_percent: float
    p5_final: Optional[float] = None
    p95_final: Optional[float] = None
    min_final: Optional[float] = None
    max_final: Optional[float] = None

    @field_validator('probability_profit', 'probability_doubling')
    @classmethod
    def validate_probability(cls, v):
        if v < 0.0 or v > 100.0:
            raise ValueError(f"Probability must be between 0 and 100, got {v}")
        return v

    @model_validator(mode='after')
    def doubling_implies_profit(self):
        if self.probability_doubling > self.probability_profit:
            raise ValueError("Probability of doubling cannot exceed probability of profit")
        return self


class SimulationResult(BaseModel):
    """Output of one Monte Carlo run; a new instance is produced per run"""

    model_config = ConfigDict(frozen=True)

    paths: List[List[float]]
    percentiles: List[PercentileBand]
    stats: SimulationStats
    initial_investment: float
    years: int
    num_simulations: int

    def percentiles_dataframe(self) -> pd.DataFrame:
        """Percentile bands with years as index"""
        df = pd.DataFrame([band.model_dump() for band in self.percentiles],
                          columns=['year', 'p10', 'p25', 'p50', 'p75', 'p90'])
        return df.set_index('year')

    def paths_dataframe(self) -> pd.DataFrame:
        """Retained sample paths, one column per simulation"""
        return pd.DataFrame({f"path_{i}": path for i, path in enumerate(self.paths)},
                            index=pd.RangeIndex(self.years + 1, name='year'))
