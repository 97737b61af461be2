"""Static configuration for the DCA simulator."""
from __future__ import annotations

DEFAULT_STARTING_PRICE = 47000.0
SPOT_PRICE_SYMBOL = "BTC-USD"

# Equivalent purchases per month for each cadence.
PERIODS_PER_MONTH = {
    "daily": 30.44,
    "weekly": 4.33,
    "monthly": 1.0,
}

FREQUENCY_OPTIONS = {
    "daily": ("Daily", "Every day"),
    "weekly": ("Weekly", "Every week"),
    "monthly": ("Monthly", "Every month"),
}

MIN_DURATION_MONTHS = 1
MAX_DURATION_MONTHS = 240
DURATION_PRESETS = (3, 6, 12, 24)

MAX_ANNUAL_GROWTH_PCT = 1000.0
DEFAULT_ANNUAL_GROWTH_PCT = 25.0
GROWTH_PRESETS = (5, 15, 25, 50, 75, 100)

# Synthetic price path bounds
PRICE_FLOOR = 10000.0
PRICE_CEILING = 500000.0
RELATIVE_PRICE_FLOOR = 0.8
VOLATILITY_BAND = 0.2

# Share of the assumed growth guaranteed on the final simulated value.
FLOOR_DAMPING = 0.5
