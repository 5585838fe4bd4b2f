import math

from pydantic import BaseModel, ConfigDict, field_validator


class Asset(BaseModel):
    """Single asset with annual expected return and volatility, both in percent"""

    model_config = ConfigDict(frozen=True)

    symbol: str
    expected_return: float
    volatility: float

    @field_validator('symbol')
    @classmethod
    def normalize_symbol(cls, v):
        v = v.strip().upper()
        if not v:
            raise ValueError("Symbol must not be empty")
        return v

    @field_validator('expected_return')
    @classmethod
    def validate_return(cls, v):
        if not math.isfinite(v):
            raise ValueError("Expected return must be finite")
        return v

    @field_validator('volatility')
    @classmethod
    def validate_volatility(cls, v):
        if not math.isfinite(v) or v < 0.0:
            raise ValueError(f"Volatility must be a non-negative number, got {v}")
        return v

    @property
    def expected_return_decimal(self) -> float:
        return self.expected_return / 100

    @property
    def volatility_decimal(self) -> float:
        return self.volatility / 100
