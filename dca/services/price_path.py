"""Synthetic monthly price paths for strategy replays."""
from __future__ import annotations

import logging
import math
from typing import List

from ..config import (
    PRICE_CEILING,
    PRICE_FLOOR,
    RELATIVE_PRICE_FLOOR,
    VOLATILITY_BAND,
)
from ..models import PricePath, RandomSource

logger = logging.getLogger(__name__)


class PricePathGenerator:
    """Blends a linear growth glidepath with bounded monthly noise."""

    @staticmethod
    def target_final_price(
        starting_price: float,
        annual_growth_pct: float,
        duration_months: int,
    ) -> float:
        return starting_price * (1 + annual_growth_pct / 100) ** (duration_months / 12)

    def generate(
        self,
        starting_price: float,
        annual_growth_pct: float,
        duration_months: int,
        rng: RandomSource,
    ) -> PricePath:
        if duration_months < 1:
            raise ValueError("duration_months must be at least 1")
        if not starting_price > 0:
            raise ValueError("starting_price must be positive")
        if annual_growth_pct < 0:
            raise ValueError("annual_growth_pct must not be negative")

        target = self.target_final_price(starting_price, annual_growth_pct, duration_months)
        relative_floor = starting_price * RELATIVE_PRICE_FLOOR
        prices: List[float] = []

        for month in range(1, duration_months + 1):
            progress = month / duration_months
            glide = starting_price + (target - starting_price) * progress
            volatility = (rng.random() - 0.5) * VOLATILITY_BAND

            price = glide + glide * volatility
            price = max(price, relative_floor)
            price = max(PRICE_FLOOR, min(PRICE_CEILING, price))
            # Halves round up.
            prices.append(float(math.floor(price + 0.5)))

        logger.debug(
            "Generated %d-month path from %.2f towards %.2f (min %.0f, max %.0f)",
            duration_months,
            starting_price,
            target,
            min(prices),
            max(prices),
        )
        return tuple(prices)
