"""
Unit Tests for Valuation and Allocation
=======================================
"""

import pandas as pd
import pytest

from wealth_engine.analytics.allocation import allocation_by_region, calculate_allocation
from wealth_engine.analytics.valuation import (
    asset_gain,
    assets_to_frame,
    cost_basis,
    portfolio_gain,
    total_value,
    value_by_category,
    weighted_expected_return,
    weighted_volatility,
)
from wealth_engine.data.normalizer import normalize_holdings
from wealth_engine.models.portfolio import AssetCategory


class TestTotalValue:

    def test_empty_is_zero(self):
        assert total_value([]) == 0

    def test_sum_of_quantity_times_price(self, dashboard_assets):
        assert total_value(dashboard_assets) == 28500  # 10500 + 18000

    def test_matches_manual_sum(self, mixed_assets):
        expected = sum(a.quantity * a.current_price for a in mixed_assets)
        assert total_value(mixed_assets) == expected

    def test_zero_quantity_contributes_nothing(self, mixed_assets):
        bond = [a for a in mixed_assets if a.category is AssetCategory.BOND][0]
        assert bond.value == 0
        assert total_value(mixed_assets) == 9000 + 55000 + 10000 + 30000


class TestGains:

    def test_asset_gain(self):
        asset = normalize_holdings([{"type": "stock", "quantity": 100, "purchasePrice": 50, "currentPrice": 60}])[0]
        gain = asset_gain(asset)
        assert gain.gain == 1000
        assert gain.gain_percent == 20

    def test_zero_cost_basis_gives_zero_percent(self):
        asset = normalize_holdings([{"type": "stock", "quantity": 1, "purchasePrice": 0, "currentPrice": 60}])[0]
        assert asset_gain(asset).gain_percent == 0

    def test_portfolio_gain(self, dashboard_assets):
        assert cost_basis(dashboard_assets) == 9500 + 17000
        gain = portfolio_gain(dashboard_assets)
        assert gain.gain == pytest.approx(2000)
        assert gain.gain_percent == pytest.approx(2000 / 26500 * 100)


class TestWeightedAssumptions:

    def test_weighted_expected_return(self, dashboard_assets):
        expected = (10500 * 0.08 + 18000 * 0.075) / 28500
        assert weighted_expected_return(dashboard_assets) == pytest.approx(expected)

    def test_weighted_volatility_zero_for_empty(self):
        assert weighted_volatility([]) == 0.0

    def test_frame_columns(self, mixed_assets):
        frame = assets_to_frame(mixed_assets)
        assert isinstance(frame, pd.DataFrame)
        assert len(frame) == 5
        assert frame["value"].sum() == pytest.approx(total_value(mixed_assets))

    def test_frame_for_empty_list(self):
        frame = assets_to_frame([])
        assert frame.empty
        assert "value" in frame.columns


class TestAllocation:

    def test_two_category_split(self, dashboard_assets):
        allocation = calculate_allocation(dashboard_assets)
        assert allocation[AssetCategory.STOCK] == pytest.approx(36.84, abs=0.01)
        assert allocation[AssetCategory.ETF] == pytest.approx(63.16, abs=0.01)
        assert sum(allocation.values()) == pytest.approx(100, abs=0.5)

    def test_two_equal_assets_fifty_fifty(self):
        assets = normalize_holdings([
            {"type": "stock", "quantity": 5, "currentPrice": 100},
            {"type": "bond", "quantity": 1, "currentPrice": 500},
        ])
        allocation = calculate_allocation(assets)
        assert set(allocation) == {AssetCategory.STOCK, AssetCategory.BOND}
        assert allocation[AssetCategory.STOCK] == pytest.approx(50)
        assert allocation[AssetCategory.BOND] == pytest.approx(50)

    def test_zero_value_categories_omitted(self, mixed_assets):
        allocation = calculate_allocation(mixed_assets)
        assert AssetCategory.BOND not in allocation
        assert len(allocation) == 4
        assert sum(allocation.values()) == pytest.approx(100, abs=0.5)

    def test_empty_and_all_zero(self):
        assert calculate_allocation([]) == {}
        zeros = normalize_holdings([{"type": "stock", "quantity": 0, "currentPrice": 10}])
        assert calculate_allocation(zeros) == {}

    def test_same_category_aggregated(self):
        assets = normalize_holdings([
            {"type": "etf", "quantity": 1, "currentPrice": 300},
            {"type": "etf", "quantity": 1, "currentPrice": 100},
            {"type": "cash", "quantity": 1, "currentPrice": 100},
        ])
        allocation = calculate_allocation(assets)
        assert allocation[AssetCategory.ETF] == pytest.approx(80)
        assert value_by_category(assets)[AssetCategory.ETF] == 400

    def test_allocation_by_region(self):
        assets = normalize_holdings([
            {"type": "stock", "quantity": 1, "currentPrice": 75, "region": "US"},
            {"type": "stock", "quantity": 1, "currentPrice": 25, "region": "AU"},
        ])
        assert allocation_by_region(assets) == pytest.approx({"US": 75.0, "AU": 25.0})
