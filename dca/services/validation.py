"""Validation of raw strategy inputs coming from the form."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Optional

from ..config import (
    DEFAULT_STARTING_PRICE,
    MAX_ANNUAL_GROWTH_PCT,
    MAX_DURATION_MONTHS,
    MIN_DURATION_MONTHS,
)
from ..messages import ServiceMessage, has_errors
from ..models import Frequency, StrategyParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    params: Optional[StrategyParameters]
    messages: List[ServiceMessage]
    required_total: Optional[float] = None

    @property
    def is_valid(self) -> bool:
        return self.params is not None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _to_int(value: Any) -> Optional[int]:
    number = _to_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


class StrategyValidator:
    """Turns form values into StrategyParameters, or explains why it cannot."""

    def validate(
        self,
        *,
        amount: Any,
        frequency: Any,
        duration_months: Any,
        annual_growth_pct: Any,
        starting_price: Any = DEFAULT_STARTING_PRICE,
        available_balance: Any = None,
    ) -> ValidationResult:
        messages: List[ServiceMessage] = []

        if any(_is_blank(value) for value in (amount, frequency, duration_months, annual_growth_pct)):
            messages.append(ServiceMessage.error("Please fill in all required fields"))
            return ValidationResult(params=None, messages=messages)

        amount_value = _to_float(amount)
        if amount_value is None or amount_value <= 0:
            messages.append(ServiceMessage.error("Please enter a valid amount"))

        try:
            frequency_value: Optional[Frequency] = Frequency.parse(frequency)
        except ValueError as exc:
            frequency_value = None
            messages.append(ServiceMessage.error(str(exc)))

        duration_value = _to_int(duration_months)
        if duration_value is None or not (
            MIN_DURATION_MONTHS <= duration_value <= MAX_DURATION_MONTHS
        ):
            messages.append(
                ServiceMessage.error(
                    f"Duration must be between {MIN_DURATION_MONTHS} and "
                    f"{MAX_DURATION_MONTHS} months"
                )
            )

        growth_value = _to_float(annual_growth_pct)
        if growth_value is None or not (0 <= growth_value <= MAX_ANNUAL_GROWTH_PCT):
            messages.append(
                ServiceMessage.error(
                    f"Growth prediction must be between 0 and {MAX_ANNUAL_GROWTH_PCT:g}%"
                )
            )

        price_value = _to_float(starting_price)
        if price_value is None or price_value <= 0:
            messages.append(
                ServiceMessage.warning(
                    "Spot price unavailable; using the default starting price "
                    f"of ${DEFAULT_STARTING_PRICE:,.0f}."
                )
            )
            price_value = DEFAULT_STARTING_PRICE

        if has_errors(messages):
            return ValidationResult(params=None, messages=messages)

        params = StrategyParameters(
            periodic_amount=amount_value,
            frequency=frequency_value,
            duration_months=duration_value,
            annual_growth_pct=growth_value,
            starting_price=price_value,
        )
        required_total = params.total_commitment

        if not _is_blank(available_balance):
            balance = _to_float(available_balance)
            if balance is None or balance < 0:
                messages.append(ServiceMessage.error("Please enter a valid available balance"))
                return ValidationResult(
                    params=None, messages=messages, required_total=required_total
                )
            if required_total > balance:
                logger.info(
                    "Rejected strategy needing %.2f with balance %.2f", required_total, balance
                )
                messages.append(
                    ServiceMessage.error(
                        f"Insufficient USD balance. Need ${required_total:,.2f} "
                        f"but only have ${balance:,.2f}"
                    )
                )
                return ValidationResult(
                    params=None, messages=messages, required_total=required_total
                )

        return ValidationResult(params=params, messages=messages, required_total=required_total)
