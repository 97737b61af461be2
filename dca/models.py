"""Domain models for the DCA simulator."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Tuple, Union

from .config import MAX_DURATION_MONTHS, MIN_DURATION_MONTHS, PERIODS_PER_MONTH


class InvalidStrategyError(ValueError):
    """Raised when strategy parameters violate the simulator preconditions."""


class RandomSource(Protocol):
    """Uniform generator on [0, 1). ``random.Random`` satisfies it."""

    def random(self) -> float: ...


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: Union["Frequency", str]) -> "Frequency":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown purchase frequency: {value!r}") from None

    @property
    def periods_per_month(self) -> float:
        return PERIODS_PER_MONTH[self.value]


PricePath = Tuple[float, ...]


@dataclass(frozen=True)
class StrategyParameters:
    """Inputs of one DCA run; immutable once built."""

    periodic_amount: float
    frequency: Frequency
    duration_months: int
    annual_growth_pct: float
    starting_price: float

    def __post_init__(self) -> None:
        # Upper bound on growth belongs to the input validator, not here.
        try:
            frequency = Frequency.parse(self.frequency)
        except ValueError as exc:
            raise InvalidStrategyError(str(exc)) from None
        object.__setattr__(self, "frequency", frequency)

        if not self.periodic_amount > 0:
            raise InvalidStrategyError("periodic_amount must be positive")
        if isinstance(self.duration_months, bool) or not isinstance(self.duration_months, int):
            raise InvalidStrategyError("duration_months must be an integer")
        if not MIN_DURATION_MONTHS <= self.duration_months <= MAX_DURATION_MONTHS:
            raise InvalidStrategyError(
                f"duration_months must be between {MIN_DURATION_MONTHS} and {MAX_DURATION_MONTHS}"
            )
        if not self.annual_growth_pct >= 0:
            raise InvalidStrategyError("annual_growth_pct must not be negative")
        if not self.starting_price > 0:
            raise InvalidStrategyError("starting_price must be positive")

    @property
    def monthly_contribution(self) -> float:
        return self.periodic_amount * self.frequency.periods_per_month

    @property
    def total_commitment(self) -> float:
        return self.monthly_contribution * self.duration_months


@dataclass(frozen=True)
class MonthlyResult:
    """State of the strategy at the end of a simulated month."""

    month: int
    price: float
    amount_invested: float
    units_purchased: float
    cumulative_units: float
    cumulative_invested: float
    current_value: float
    reference_price: float
    floor_adjusted: bool = False


@dataclass(frozen=True)
class Projection:
    """Aggregated totals of a replayed strategy."""

    invested_total: float
    units_total: float
    current_value: float
    frequency: Frequency
    duration_months: int
    periodic_amount: float

    @property
    def profit_loss(self) -> float:
        return self.current_value - self.invested_total

    @property
    def profit_loss_pct(self) -> float:
        if not self.invested_total:
            return 0.0
        return (self.profit_loss / self.invested_total) * 100

    @property
    def average_cost(self) -> float:
        if not self.units_total:
            return 0.0
        return self.invested_total / self.units_total


@dataclass(frozen=True)
class PreviewProjection:
    """Smooth-growth estimate computed without a price path.

    Profit and ROI are floored at zero: the preview is a best-case figure and
    never reports a projected loss.
    """

    invested_total: float
    final_price: float
    average_purchase_price: float
    units_total: float
    expected_final_value: float

    @property
    def expected_profit(self) -> float:
        return max(0.0, self.expected_final_value - self.invested_total)

    @property
    def expected_roi_pct(self) -> float:
        if not self.invested_total:
            return 0.0
        return max(
            0.0,
            (self.expected_final_value - self.invested_total) / self.invested_total * 100,
        )
