"""
Unit tests for the DCA domain models.
"""

import pytest

from dca import Frequency, InvalidStrategyError, PreviewProjection, Projection, StrategyParameters


def _params(**overrides):
    values = dict(
        periodic_amount=100,
        frequency=Frequency.MONTHLY,
        duration_months=12,
        annual_growth_pct=25,
        starting_price=47000,
    )
    values.update(overrides)
    return StrategyParameters(**values)


class TestFrequency:
    @pytest.mark.parametrize(
        "frequency, expected",
        [(Frequency.DAILY, 30.44), (Frequency.WEEKLY, 4.33), (Frequency.MONTHLY, 1.0)],
    )
    def test_periods_per_month(self, frequency, expected):
        assert frequency.periods_per_month == expected

    def test_parse_is_case_insensitive(self):
        assert Frequency.parse(" Weekly ") is Frequency.WEEKLY
        assert Frequency.parse(Frequency.DAILY) is Frequency.DAILY

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown purchase frequency"):
            Frequency.parse("yearly")


class TestStrategyParameters:
    def test_string_frequency_is_coerced(self):
        assert _params(frequency="daily").frequency is Frequency.DAILY

    def test_monthly_contribution_and_commitment(self):
        params = _params(periodic_amount=10, frequency=Frequency.DAILY, duration_months=3)
        assert params.monthly_contribution == pytest.approx(304.4)
        assert params.total_commitment == pytest.approx(913.2)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"periodic_amount": 0},
            {"periodic_amount": -5},
            {"duration_months": 0},
            {"duration_months": 241},
            {"duration_months": 12.5},
            {"annual_growth_pct": -1},
            {"starting_price": 0},
            {"frequency": "hourly"},
        ],
    )
    def test_invalid_values_raise(self, overrides):
        with pytest.raises(InvalidStrategyError):
            _params(**overrides)

    def test_growth_above_form_limit_is_accepted(self):
        assert _params(annual_growth_pct=5000).annual_growth_pct == 5000

    def test_invalid_strategy_error_is_value_error(self):
        with pytest.raises(ValueError):
            _params(duration_months=-3)


class TestProjection:
    def test_derived_values(self):
        projection = Projection(
            invested_total=1200,
            units_total=0.024,
            current_value=1500,
            frequency=Frequency.MONTHLY,
            duration_months=12,
            periodic_amount=100,
        )
        assert projection.profit_loss == 300
        assert projection.profit_loss_pct == pytest.approx(25.0)
        assert projection.average_cost == pytest.approx(50000)

    def test_zero_totals_do_not_divide(self):
        projection = Projection(0, 0, 0, Frequency.MONTHLY, 1, 100)
        assert projection.profit_loss_pct == 0.0
        assert projection.average_cost == 0.0


class TestPreviewProjection:
    def test_losses_are_floored_at_zero(self):
        preview = PreviewProjection(
            invested_total=1000,
            final_price=40000,
            average_purchase_price=45000,
            units_total=0.02,
            expected_final_value=800,
        )
        assert preview.expected_profit == 0.0
        assert preview.expected_roi_pct == 0.0
