"""
Exception types raised at the input-validation boundary
"""


class PortfolioValidationError(ValueError):
    """Rejected input; never fatal to the surrounding session"""


class DuplicateAssetError(PortfolioValidationError):
    """Symbol already present in the universe (case-insensitive)"""

    def __init__(self, symbol: str):
        super().__init__(f"Asset '{symbol}' already added")
        self.symbol = symbol


class MinimumAssetCountError(PortfolioValidationError):
    """Removal would leave fewer assets than optimization requires"""

    def __init__(self, minimum: int):
        super().__init__(f"Need at least {minimum} assets for optimization")
        self.minimum = minimum


class UnknownAssetError(PortfolioValidationError):
    def __init__(self, symbol: str):
        super().__init__(f"Asset '{symbol}' not found")
        self.symbol = symbol


class CorrelationImportError(PortfolioValidationError):
    """Imported correlation data is malformed or unavailable"""


class SimulationCancelledError(RuntimeError):
    """A Monte Carlo run was abandoned before its results were reduced"""
