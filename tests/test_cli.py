"""
Churn Scoring - Command-Line Tests
"""

import importlib.util
import sys
from pathlib import Path

import pandas as pd
import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "predict.py"


@pytest.fixture
def cli(monkeypatch, reset_logging):
    """Load scripts/predict.py and return a runner for main() with the given flags."""
    spec = importlib.util.spec_from_file_location("predict_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    def run(*flags):
        monkeypatch.setattr(sys, "argv", ["predict.py", "--no-delay", *flags])
        return module.main()

    return run


def test_single_customer(cli, capsys):
    code = cli("--tenure", "12", "--complaints", "1", "--cashback", "150",
               "--satisfaction", "7", "--other", "--city-tier", "2")

    out = capsys.readouterr().out
    assert code == 0
    assert "Churn probability: 58.2%" in out
    assert "Risk level:        Medium" in out
    assert "  - Customer Complaints" in out


def test_invalid_customer_exit_code(cli, capsys):
    assert cli("--satisfaction", "11") == 2
    assert "Churn probability" not in capsys.readouterr().out


def test_missing_file_exit_code(cli, tmp_path):
    assert cli("--file", str(tmp_path / "missing.csv")) == 1


def test_score_file(cli, capsys, tmp_path):
    path = tmp_path / "customers.csv"
    pd.DataFrame({
        "Tenure": [4, 20, 10],
        "Complain": [1, 0, 1],
        "CashbackAmount": [120.5, 180.0, 95.0],
        "SatisfactionScore": [3, 2, 1],
        "CityTier": [3, 5, 1],
        "PreferedOrderCat": ["Mobile Phone", "Grocery", "Fashion"],
    }).to_csv(path, index=False)

    assert cli("--file", str(path)) == 2
    assert cli("--file", str(path), "--skip-invalid") == 0
    assert "Customers scored:      2" in capsys.readouterr().out


def test_json_report(cli, capsys, monkeypatch, tmp_path):
    from churn_scoring.utils import report_generator

    monkeypatch.setattr(report_generator, "REPORTS_DIR", tmp_path)

    assert cli("--report", "json") == 0
    assert len(list(tmp_path.glob("churn_report_*.json"))) == 1
    assert "Report saved to" in capsys.readouterr().out
