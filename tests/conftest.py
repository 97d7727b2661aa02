import pytest

from tests.fixtures.sample_holdings import (
    dashboard_holdings,
    table_holdings,
    holdings_frame,
    single_stock_holding,
)
from wealth_engine.config.settings import EngineConfig
from wealth_engine.data.normalizer import normalize_holdings


@pytest.fixture
def raw_dashboard_holdings():
    return dashboard_holdings()


@pytest.fixture
def raw_table_holdings():
    return table_holdings()


@pytest.fixture
def raw_holdings_frame():
    return holdings_frame()


@pytest.fixture
def dashboard_assets():
    return normalize_holdings(dashboard_holdings())


@pytest.fixture
def mixed_assets():
    return normalize_holdings(table_holdings())


@pytest.fixture
def single_stock():
    return normalize_holdings(single_stock_holding())


@pytest.fixture
def default_config():
    return EngineConfig()
