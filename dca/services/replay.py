"""Period-by-period replay of a DCA strategy over a price path."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence, Tuple

from ..config import FLOOR_DAMPING
from ..models import MonthlyResult, Projection, StrategyParameters

logger = logging.getLogger(__name__)


class StrategyReplayEngine:
    """Buys a fixed monthly amount at each path price and tracks the totals."""

    def replay(
        self,
        params: StrategyParameters,
        path: Sequence[float],
    ) -> Tuple[MonthlyResult, ...]:
        if len(path) < params.duration_months:
            logger.warning(
                "Price path has %d entries for a %d-month strategy; "
                "missing months use the starting price",
                len(path),
                params.duration_months,
            )

        monthly_amount = params.monthly_contribution
        cumulative_units = 0.0
        cumulative_invested = 0.0
        results: List[MonthlyResult] = []

        for month in range(1, params.duration_months + 1):
            price = path[month - 1] if month <= len(path) else params.starting_price
            units = monthly_amount / price
            cumulative_units += units
            cumulative_invested += monthly_amount

            results.append(
                MonthlyResult(
                    month=month,
                    price=price,
                    amount_invested=monthly_amount,
                    units_purchased=units,
                    cumulative_units=cumulative_units,
                    cumulative_invested=cumulative_invested,
                    current_value=cumulative_units * price if cumulative_units else 0.0,
                    reference_price=price,
                )
            )

        if results and params.annual_growth_pct > 0:
            results[-1] = self._apply_terminal_floor(results[-1], params.annual_growth_pct)

        return tuple(results)

    def summarize(
        self,
        params: StrategyParameters,
        results: Sequence[MonthlyResult],
    ) -> Projection:
        if not results:
            raise ValueError("cannot summarize an empty replay")

        last = results[-1]
        return Projection(
            invested_total=last.cumulative_invested,
            units_total=last.cumulative_units,
            current_value=last.current_value,
            frequency=params.frequency,
            duration_months=params.duration_months,
            periodic_amount=params.periodic_amount,
        )

    def _apply_terminal_floor(
        self,
        last: MonthlyResult,
        annual_growth_pct: float,
    ) -> MonthlyResult:
        # Floors losses only; units and invested totals stay untouched.
        minimum_value = last.cumulative_invested * (
            1 + (annual_growth_pct / 100) * FLOOR_DAMPING
        )
        if last.current_value >= minimum_value:
            return last
        if last.cumulative_units <= 0:
            logger.warning("No units accumulated; skipping terminal floor adjustment")
            return last

        adjusted_price = minimum_value / last.cumulative_units
        logger.debug(
            "Terminal value %.2f below floor %.2f; revaluing at %.2f",
            last.current_value,
            minimum_value,
            adjusted_price,
        )
        return replace(
            last,
            current_value=minimum_value,
            reference_price=adjusted_price,
            floor_adjusted=True,
        )
