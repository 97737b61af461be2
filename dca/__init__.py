"""Dollar-cost averaging simulation package."""

from .config import DEFAULT_STARTING_PRICE, FREQUENCY_OPTIONS, PERIODS_PER_MONTH
from .messages import MessageLevel, ServiceMessage
from .models import (
    Frequency,
    InvalidStrategyError,
    MonthlyResult,
    PreviewProjection,
    Projection,
    RandomSource,
    StrategyParameters,
)
from .services import (
    DcaSimulator,
    PreviewCalculator,
    PricePathGenerator,
    SimulationResult,
    SpotPriceResult,
    SpotPriceService,
    StrategyReplayEngine,
    StrategyValidator,
    ValidationResult,
)

__all__ = [
    "DEFAULT_STARTING_PRICE",
    "DcaSimulator",
    "FREQUENCY_OPTIONS",
    "Frequency",
    "InvalidStrategyError",
    "MessageLevel",
    "MonthlyResult",
    "PERIODS_PER_MONTH",
    "PreviewCalculator",
    "PreviewProjection",
    "PricePathGenerator",
    "Projection",
    "RandomSource",
    "ServiceMessage",
    "SimulationResult",
    "SpotPriceResult",
    "SpotPriceService",
    "StrategyParameters",
    "StrategyReplayEngine",
    "StrategyValidator",
    "ValidationResult",
]
