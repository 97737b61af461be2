"""Service layer for the DCA simulator."""
from .preview import PreviewCalculator
from .price_path import PricePathGenerator
from .replay import StrategyReplayEngine
from .report import build_monthly_frame, to_csv_bytes
from .simulation import DcaSimulator, SimulationResult
from .spot_price import SpotPriceResult, SpotPriceService
from .validation import StrategyValidator, ValidationResult

__all__ = [
    "DcaSimulator",
    "PreviewCalculator",
    "PricePathGenerator",
    "SimulationResult",
    "SpotPriceResult",
    "SpotPriceService",
    "StrategyReplayEngine",
    "StrategyValidator",
    "ValidationResult",
    "build_monthly_frame",
    "to_csv_bytes",
]
