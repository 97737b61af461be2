"""
Unit tests for PreviewCalculator.
"""

import math
import random

import pytest

from dca import DcaSimulator, Frequency, PreviewCalculator, PricePathGenerator, StrategyParameters


@pytest.fixture
def calculator():
    return PreviewCalculator()


class TestPreview:
    def test_monthly_scenario(self, calculator, monthly_params):
        preview = calculator.preview(monthly_params)

        assert preview.invested_total == 1200
        assert preview.final_price == pytest.approx(58750)
        assert preview.average_purchase_price == pytest.approx(47000 * math.sqrt(1.25))
        assert preview.expected_final_value == pytest.approx(1200 * math.sqrt(1.25))
        assert preview.expected_final_value == pytest.approx(1341.64, abs=0.01)
        assert preview.expected_profit == pytest.approx(1200 * math.sqrt(1.25) - 1200)
        assert preview.expected_roi_pct == pytest.approx((math.sqrt(1.25) - 1) * 100)

    def test_daily_invested_total(self, calculator):
        params = StrategyParameters(10, Frequency.DAILY, 3, 25, 47000)
        assert calculator.preview(params).invested_total == pytest.approx(913.2)

    def test_two_years_scales_by_geometric_mean(self, calculator):
        params = StrategyParameters(50, Frequency.WEEKLY, 24, 25, 47000)
        preview = calculator.preview(params)

        invested = 50 * 4.33 * 24
        assert preview.invested_total == pytest.approx(invested)
        assert preview.expected_final_value == pytest.approx(invested * 1.25)

    @pytest.mark.parametrize("frequency", list(Frequency))
    @pytest.mark.parametrize("growth", [0, 0.5, 25, 1000])
    @pytest.mark.parametrize("months", [1, 12, 240])
    def test_profit_and_roi_never_negative(self, calculator, frequency, growth, months):
        preview = calculator.preview(StrategyParameters(37.5, frequency, months, growth, 63000))
        assert preview.expected_profit >= 0
        assert preview.expected_roi_pct >= 0

    def test_repeated_calls_are_identical(self, calculator, monthly_params):
        assert calculator.preview(monthly_params) == calculator.preview(monthly_params)


class TestIndependence:
    def test_preview_never_touches_randomness(self, calculator, monthly_params, monkeypatch):
        expected = calculator.preview(monthly_params)

        def _fail(*args, **kwargs):
            raise AssertionError("preview must not use randomness")

        monkeypatch.setattr(random, "random", _fail)
        monkeypatch.setattr(PricePathGenerator, "generate", _fail)

        assert calculator.preview(monthly_params) == expected

    def test_simulation_seed_does_not_affect_preview(self, calculator, monthly_params):
        before = calculator.preview(monthly_params)
        DcaSimulator().run(monthly_params, random.Random(1))
        DcaSimulator().run(monthly_params, random.Random(2))
        assert calculator.preview(monthly_params) == before
