"""
Sample holdings fixtures for deterministic tests.

Raw records mimic what the dashboard sends: camelCase keys from the UI
forms and snake_case keys from the holdings table.
"""

import pandas as pd


def dashboard_holdings():
    """Two-asset AU portfolio in dashboard (camelCase) shape: 10,500 stock + 18,000 ETF."""
    return [
        {
            "id": "1",
            "type": "stock",
            "symbol": "CBA.AX",
            "name": "Commonwealth Bank",
            "quantity": 100,
            "purchasePrice": 95,
            "currentPrice": 105,
            "currency": "AUD",
            "region": "AU",
            "exchange": "ASX",
            "purchaseDate": "2024-01-01",
            "expectedReturn": 0.08,
            "volatility": 0.18,
            "metadata": {},
        },
        {
            "id": "2",
            "type": "etf",
            "symbol": "VAS.AX",
            "name": "Vanguard Australian Shares",
            "quantity": 200,
            "purchasePrice": 85,
            "currentPrice": 90,
            "currency": "AUD",
            "region": "AU",
            "exchange": "ASX",
            "purchaseDate": "2024-01-01",
            "expectedReturn": 0.075,
            "volatility": 0.15,
            "metadata": {},
        },
    ]


def table_holdings():
    """Mixed portfolio in holdings-table (snake_case) shape, legacy type names, no return assumptions."""
    return [
        {"id": "h1", "asset_type": "stock", "quantity": 100, "purchase_price": 85, "current_price": 90},
        {"id": "h2", "asset_type": "super", "quantity": 1, "purchase_price": 50000, "current_price": 55000},
        {"id": "h3", "asset_type": "fd", "quantity": 1, "purchase_price": 10000, "current_price": 10000},
        {"id": "h4", "asset_type": "crypto", "quantity": 0.5, "purchase_price": 40000, "current_price": 60000},
        {"id": "h5", "asset_type": "bond", "quantity": 0, "purchase_price": 1000, "current_price": 1000},
    ]


def holdings_frame():
    return pd.DataFrame(table_holdings())


def single_stock_holding(quantity=10, price=100):
    """The reference scenario: starting value 1,000 in one stock."""
    return [{"id": "s", "type": "stock", "quantity": quantity, "currentPrice": price}]
