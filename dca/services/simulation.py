"""Orchestration of a full randomized DCA simulation."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from ..models import (
    MonthlyResult,
    PricePath,
    Projection,
    RandomSource,
    StrategyParameters,
)
from .price_path import PricePathGenerator
from .replay import StrategyReplayEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    params: StrategyParameters
    price_path: PricePath
    monthly_results: Tuple[MonthlyResult, ...]
    projection: Projection
    expected_final_price: float

    @property
    def price_range(self) -> Tuple[float, float]:
        prices = [result.price for result in self.monthly_results]
        return min(prices), max(prices)

    @property
    def total_return_pct(self) -> float:
        return self.projection.profit_loss_pct


class DcaSimulator:
    """Runs the price path generator and the replay engine for one strategy."""

    def __init__(
        self,
        generator: PricePathGenerator | None = None,
        engine: StrategyReplayEngine | None = None,
    ) -> None:
        self._generator = generator or PricePathGenerator()
        self._engine = engine or StrategyReplayEngine()

    def run(
        self,
        params: StrategyParameters,
        rng: Optional[RandomSource] = None,
    ) -> SimulationResult:
        # A fresh source per run keeps concurrent runs independent.
        rng = rng if rng is not None else random.Random()

        path = self._generator.generate(
            starting_price=params.starting_price,
            annual_growth_pct=params.annual_growth_pct,
            duration_months=params.duration_months,
            rng=rng,
        )
        results = self._engine.replay(params, path)
        projection = self._engine.summarize(params, results)

        logger.info(
            "DCA simulation: %s x %.2f for %d months at %.1f%% growth -> "
            "invested %.2f, value %.2f",
            params.frequency.value,
            params.periodic_amount,
            params.duration_months,
            params.annual_growth_pct,
            projection.invested_total,
            projection.current_value,
        )

        return SimulationResult(
            params=params,
            price_path=path,
            monthly_results=results,
            projection=projection,
            expected_final_price=self._generator.target_final_price(
                params.starting_price,
                params.annual_growth_pct,
                params.duration_months,
            ),
        )
