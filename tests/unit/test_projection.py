"""
Unit Tests for the Projection Engine
====================================
"""

import logging
from decimal import Decimal

import pytest

from wealth_engine.analytics.projection import (
    project_portfolio,
    project_scenarios,
    resolve_growth_rate,
    scale_series,
)
from wealth_engine.config.settings import EngineConfig
from wealth_engine.data.normalizer import normalize_holdings
from wealth_engine.models.portfolio import Scenario
from wealth_engine.utils.exceptions import InvalidContributionError, InvalidHorizonError


class TestBaseProjection:

    def test_reference_year(self, single_stock):
        series = project_portfolio(single_stock, monthly_contribution=500, horizon_years=1)
        year_one = series[1]

        assert year_one.year == 1
        assert year_one.total_value == pytest.approx(7075)
        assert year_one.contributions == pytest.approx(7000)
        assert year_one.growth == pytest.approx(75)

    def test_year_zero_is_starting_value(self, dashboard_assets):
        series = project_portfolio(dashboard_assets, 250, 5)
        assert series[0].year == 0
        assert series[0].total_value == 28500
        assert series[0].contributions == 28500
        assert series[0].growth == 0
        assert series.starting_value == 28500

    @pytest.mark.parametrize("horizon", [0, 1, 10, 30])
    def test_length_is_horizon_plus_one(self, single_stock, horizon):
        series = project_portfolio(single_stock, 100, horizon)
        assert len(series) == horizon + 1
        assert series.horizon == horizon
        assert [p.year for p in series] == list(range(horizon + 1))

    def test_growth_identity_holds_every_year(self, mixed_assets):
        for point in project_portfolio(mixed_assets, 1234.5, 25):
            assert point.growth == pytest.approx(point.total_value - point.contributions)

    def test_values_never_decrease(self, mixed_assets):
        values = project_portfolio(mixed_assets, 0, 20).total_values()
        assert all(later >= earlier for earlier, later in zip(values, values[1:]))

    def test_empty_portfolio_grows_from_contributions(self):
        series = project_portfolio([], 100, 2)
        assert series[0].total_value == 0
        assert series[1].total_value == pytest.approx(1200)
        assert series[2].total_value == pytest.approx(1200 * 1.075 + 1200)
        assert series[2].contributions == pytest.approx(2400)

    def test_zero_contribution_compounds(self, single_stock):
        series = project_portfolio(single_stock, 0, 10)
        assert series.final_value == pytest.approx(1000 * 1.075 ** 10)
        assert series[10].contributions == 1000

    def test_starting_value_override(self, single_stock):
        series = project_portfolio(single_stock, 0, 1, starting_value=2000)
        assert series[0].total_value == 2000
        assert series[1].total_value == pytest.approx(2150)


class TestValidation:

    @pytest.mark.parametrize("horizon", [-1, 2.5, "10", None, True])
    def test_invalid_horizon(self, single_stock, horizon):
        with pytest.raises(InvalidHorizonError):
            project_portfolio(single_stock, 100, horizon)

    def test_decimal_contribution(self, single_stock):
        series = project_portfolio(single_stock, Decimal("500"), 1)
        assert series[1].total_value == pytest.approx(7075)
        assert series[1].contributions == pytest.approx(7000)

    def test_decimal_starting_value(self):
        series = project_portfolio([], 0, 1, starting_value=Decimal("2000.00"))
        assert series[1].total_value == pytest.approx(2150)

    @pytest.mark.parametrize("amount", [
        -0.01, float("nan"), float("inf"), "500", None,
        Decimal("-1"), Decimal("NaN"), Decimal("sNaN"), complex(500, 0),
    ])
    def test_invalid_contribution(self, single_stock, amount):
        with pytest.raises(InvalidContributionError):
            project_portfolio(single_stock, amount, 5)

    def test_errors_are_value_errors(self, single_stock):
        with pytest.raises(ValueError):
            project_portfolio(single_stock, 100, -3)


class TestGrowthModels:

    def test_uniform_ignores_asset_returns(self, mixed_assets):
        assert resolve_growth_rate(mixed_assets) == 0.075

    def test_blended_uses_weighted_return(self, dashboard_assets):
        config = EngineConfig(growth_model="blended")
        rate = resolve_growth_rate(dashboard_assets, config)
        assert rate == pytest.approx((10500 * 0.08 + 18000 * 0.075) / 28500)

        series = project_portfolio(dashboard_assets, 0, 1, config)
        assert series[1].total_value == pytest.approx(28500 * (1 + rate))

    def test_blended_rate_floored_at_total_loss(self, caplog):
        assets = normalize_holdings([
            {"type": "crypto", "quantity": 1, "currentPrice": 1000, "expectedReturn": -1.5},
        ])
        config = EngineConfig(growth_model="blended")

        with caplog.at_level(logging.WARNING):
            assert resolve_growth_rate(assets, config) == -1.0
        assert "clamped" in caplog.text

        series = project_portfolio(assets, 100, 5, config)
        assert all(point.total_value >= 0 for point in series)
        assert series[1].total_value == pytest.approx(1200)

    def test_blended_empty_falls_back_to_base_rate(self):
        assert resolve_growth_rate([], EngineConfig(growth_model="blended")) == 0.075

    def test_configured_base_rate(self, single_stock):
        config = EngineConfig(base_growth_rate=0.05)
        assert project_portfolio(single_stock, 0, 1, config)[1].total_value == pytest.approx(1050)


class TestRealValue:

    def test_real_value_deflated_by_regional_inflation(self, single_stock):
        series = project_portfolio(single_stock, 0, 2)
        assert series[0].real_value == 1000
        assert series[2].real_value == pytest.approx(series[2].total_value / 1.025 ** 2)

    def test_region_changes_inflation(self, single_stock):
        au = project_portfolio(single_stock, 0, 5)
        india = project_portfolio(single_stock, 0, 5, EngineConfig(region="IN"))
        assert au.final_value == pytest.approx(india.final_value)
        assert india[5].real_value < au[5].real_value


class TestScenarios:

    def test_scenario_ordering(self, dashboard_assets):
        bundle = project_scenarios(dashboard_assets, 500, 10)
        for t in range(1, 11):
            assert bundle.optimistic[t].total_value > bundle.base_case[t].total_value
            assert bundle.base_case[t].total_value > bundle.pessimistic[t].total_value

    def test_shared_year_zero_anchor(self, dashboard_assets):
        bundle = project_scenarios(dashboard_assets, 500, 3)
        assert bundle.optimistic[0] == bundle.base_case[0] == bundle.pessimistic[0]

    def test_fixed_factors(self, single_stock):
        bundle = project_scenarios(single_stock, 500, 1)
        assert bundle.optimistic[1].total_value == pytest.approx(7075 * 1.30)
        assert bundle.pessimistic[1].total_value == pytest.approx(7075 * 0.75)

    def test_contributions_shared_growth_recomputed(self, single_stock):
        bundle = project_scenarios(single_stock, 500, 1)
        pessimistic = bundle.pessimistic[1]
        assert pessimistic.contributions == pytest.approx(7000)
        assert pessimistic.growth == pytest.approx(7075 * 0.75 - 7000)
        assert pessimistic.growth < 0

    def test_equal_lengths(self, mixed_assets):
        bundle = project_scenarios(mixed_assets, 100, 7)
        assert len(bundle.base_case) == len(bundle.optimistic) == len(bundle.pessimistic) == 8

    def test_horizon_zero(self, single_stock):
        bundle = project_scenarios(single_stock, 100, 0)
        assert len(bundle.optimistic) == 1
        assert bundle.optimistic[0].total_value == 1000

    def test_get_by_scenario(self, single_stock):
        bundle = project_scenarios(single_stock, 100, 2)
        assert bundle.get(Scenario.OPTIMISTIC) is bundle.optimistic
        assert bundle.get("base") is bundle.base_case

    def test_scale_series_identity(self, single_stock):
        base = project_portfolio(single_stock, 100, 4)
        assert scale_series(base, 1.0) == base
