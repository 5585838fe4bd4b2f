"""
Fixed parameters for frontier sampling, portfolio selection and Monte Carlo projection.
Values mirror the behaviour of the portfolio optimizer panel they were derived from.
"""

# Asset universe
MIN_ASSETS = 2  # optimization needs at least two assets

# Correlation model
DEFAULT_CORRELATION = 0.4  # arbitrary default for newly created pairs
CORRELATION_BOUNDS = (-1.0, 1.0)
FALLBACK_CORRELATION_RANGE = (0.3, 0.6)  # synthetic matrix when an import fails

# Efficient frontier sampling
FRONTIER_SAMPLES = 1000
DEFAULT_RISK_FREE_RATE = 4.5  # percent

# Selection
DEFAULT_RISK_TOLERANCE = 50
RISK_TOLERANCE_BOUNDS = (0.0, 100.0)
RISK_SLACK = 1.1  # candidates may exceed the target risk by 10%

# Monte Carlo projection
YEARS_RANGE = (0, 30)
SIMULATIONS_RANGE = (100, 10_000)
DEFAULT_YEARS = 10
DEFAULT_NUM_SIMULATIONS = 1000
DEFAULT_INITIAL_INVESTMENT = 100_000.0
PATH_SAMPLE_LIMIT = 50
DRAWDOWN_SAMPLE_SIZE = 100
DEFAULT_BATCH_SIZE = 2500

PERCENTILE_LEVELS = {
    "p10": 0.10,
    "p25": 0.25,
    "p50": 0.50,
    "p75": 0.75,
    "p90": 0.90,
}

# Starter universe (symbol, expected return %, volatility %)
DEFAULT_ASSETS = [
    {"symbol": "AAPL", "expected_return": 12.0, "volatility": 25.0},
    {"symbol": "GOOGL", "expected_return": 15.0, "volatility": 30.0},
    {"symbol": "MSFT", "expected_return": 11.0, "volatility": 22.0},
]

# Risk tolerance profiles (slider bands, lower bound inclusive)
RISK_TOLERANCE_PROFILES = [
    {"name": "Conservative", "lower": 0.0, "risk_tolerance": 15.0},
    {"name": "Moderate", "lower": 25.0, "risk_tolerance": 40.0},
    {"name": "Growth", "lower": 50.0, "risk_tolerance": 65.0},
    {"name": "Aggressive", "lower": 75.0, "risk_tolerance": 90.0},
]

# Allocation display
MIN_DISPLAY_WEIGHT_PCT = 0.5
