"""Closed-form "quick estimate" of a DCA strategy."""
from __future__ import annotations

import math

from ..models import PreviewProjection, StrategyParameters


class PreviewCalculator:
    """Projects a smooth-growth outcome without simulating a price path.

    The average cost basis is approximated by the geometric mean of the
    starting and final prices, which is what periodic purchases converge to
    under steady exponential growth.
    """

    def preview(self, params: StrategyParameters) -> PreviewProjection:
        invested_total = params.monthly_contribution * params.duration_months
        growth_factor = (1 + params.annual_growth_pct / 100) ** (params.duration_months / 12)

        final_price = params.starting_price * growth_factor
        average_purchase_price = params.starting_price * math.sqrt(growth_factor)
        units_total = invested_total / average_purchase_price

        return PreviewProjection(
            invested_total=invested_total,
            final_price=final_price,
            average_purchase_price=average_purchase_price,
            units_total=units_total,
            expected_final_value=units_total * final_price,
        )
