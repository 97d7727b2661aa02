"""
Integration Tests: Command-Line Runner
======================================
"""

import json

import pandas as pd
import pytest
import yaml

from tests.fixtures.sample_holdings import dashboard_holdings, table_holdings
from wealth_engine.core.runner import build_parser, main
from wealth_engine.data.loader import load_holdings_file
from wealth_engine.utils.exceptions import ConfigurationError


@pytest.fixture
def holdings_json(tmp_path):
    path = tmp_path / "holdings.json"
    path.write_text(json.dumps({"holdings": dashboard_holdings()}))
    return path


@pytest.fixture
def holdings_csv(tmp_path):
    path = tmp_path / "holdings.csv"
    pd.DataFrame(table_holdings()).to_csv(path, index=False)
    return path


class TestHoldingsLoader:

    def test_json_wrapper(self, holdings_json):
        records = load_holdings_file(str(holdings_json))
        assert len(records) == 2
        assert records[0]["symbol"] == "CBA.AX"

    def test_yaml_list(self, tmp_path):
        path = tmp_path / "holdings.yaml"
        path.write_text(yaml.safe_dump(table_holdings()))
        assert len(load_holdings_file(str(path))) == 5

    def test_csv(self, holdings_csv):
        records = load_holdings_file(str(holdings_csv))
        assert [r["asset_type"] for r in records] == ["stock", "super", "fd", "crypto", "bond"]

    def test_bad_shape(self, tmp_path):
        path = tmp_path / "holdings.json"
        path.write_text(json.dumps({"assets": []}))
        with pytest.raises(ConfigurationError):
            load_holdings_file(str(path))

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "holdings.xlsx"
        path.write_text("")
        with pytest.raises(ConfigurationError):
            load_holdings_file(str(path))


def test_parser_defaults():
    args = build_parser().parse_args(["--holdings", "h.json"])
    assert args.years == 10
    assert args.monthly == 0.0
    assert not args.monte_carlo


def test_json_output(holdings_json, capsys):
    exit_code = main(["--holdings", str(holdings_json), "--monthly", "500", "--years", "5", "--json"])
    assert exit_code == 0

    data = json.loads(capsys.readouterr().out)
    assert data["snapshot"]["total_value"] == 28500
    assert data["currency"] == "AUD"
    assert len(data["projections"]["base_case"]) == 6
    assert data["warnings"] == []
    assert "what_if" not in data


def test_what_if_and_monte_carlo(holdings_csv, capsys):
    exit_code = main([
        "--holdings", str(holdings_csv),
        "--monthly", "500", "--years", "3",
        "--current-age", "40", "--retirement-age", "65",
        "--what-if-monthly", "800", "--additional-investment", "5000",
        "--monte-carlo", "--simulations", "50", "--seed", "1", "--goal", "200000",
        "--json",
    ])
    assert exit_code == 0

    data = json.loads(capsys.readouterr().out)
    assert data["what_if"]["current_horizon"] == 25
    assert data["what_if"]["what_if"][0]["total_value"] == pytest.approx(data["what_if"]["current"][0]["total_value"] + 5000)
    assert [r["year"] for r in data["monte_carlo"]] == [1, 2, 3]


def test_region_override_and_warnings(holdings_json, capsys):
    exit_code = main(["--holdings", str(holdings_json), "--region", "us", "--monthly", "3000", "--json"])
    assert exit_code == 0

    data = json.loads(capsys.readouterr().out)
    assert data["currency"] == "USD"
    assert len(data["warnings"]) == 2


def test_table_output(holdings_json, capsys):
    assert main(["--holdings", str(holdings_json), "--monthly", "100", "--years", "10"]) == 0
    out = capsys.readouterr().out
    assert "28,500.00" in out


def test_output_file(holdings_json, tmp_path, capsys):
    target = tmp_path / "out" / "results.json"
    assert main(["--holdings", str(holdings_json), "--json", "--output", str(target)]) == 0

    payload = json.loads(target.read_text())
    assert "export_timestamp" in payload["metadata"]
    assert payload["results"]["snapshot"]["asset_count"] == 2


@pytest.mark.parametrize("extra", [
    ["--years", "-1"],
    ["--monthly", "-5"],
    ["--region", "NZ"],
    ["--current-age", "70", "--retirement-age", "65"],
])
def test_invalid_input_exit_code(holdings_json, capsys, extra):
    assert main(["--holdings", str(holdings_json)] + extra) == 2
    assert "❌" in capsys.readouterr().err


def test_missing_holdings_file(tmp_path, capsys):
    assert main(["--holdings", str(tmp_path / "nope.json")]) == 2
