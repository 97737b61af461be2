"""Shared fixtures for the DCA simulator tests."""
import itertools

import pytest

from dca import Frequency, StrategyParameters


class SequenceRandom:
    """Deterministic random source cycling through fixed draws."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return next(self._values)


@pytest.fixture
def sequence_random():
    return SequenceRandom


@pytest.fixture
def monthly_params():
    return StrategyParameters(
        periodic_amount=100,
        frequency=Frequency.MONTHLY,
        duration_months=12,
        annual_growth_pct=25,
        starting_price=47000,
    )
