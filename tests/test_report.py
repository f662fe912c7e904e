"""
Churn Scoring - Report Tests
"""

import json

import pytest

from churn_scoring.utils import format_probability, render_report, save_report


@pytest.fixture
def sample_result(predictor, sample_input):
    return predictor.score(sample_input)


def test_markdown_report(sample_input, sample_result):
    report = render_report(sample_input, sample_result, generated_at="2024-01-01 09:00:00")

    assert report.startswith("# Customer Churn Prediction Report")
    assert "Generated: 2024-01-01 09:00:00" in report
    assert "| City Tier | 2 |" in report
    assert "| Other Products | Yes |" in report
    assert "- Churn probability: 58.2%" in report
    assert "- Risk level: Medium" in report
    assert "1. Customer Complaints" in report
    for rec in sample_result.recommendations:
        assert f"- {rec}" in report


def test_json_report(sample_input, sample_result):
    payload = json.loads(render_report(sample_input, sample_result, fmt="json"))

    assert payload["customer"]["cashbackAmount"] == 150
    assert payload["prediction"]["churnRisk"] == "medium"
    assert payload["prediction"]["keyDrivers"] == sample_result.key_drivers


def test_unknown_format(sample_input, sample_result):
    with pytest.raises(ValueError):
        render_report(sample_input, sample_result, fmt="pdf")


def test_save_report(tmp_path, sample_input, sample_result):
    path = save_report(sample_input, sample_result, fmt="json", output_dir=tmp_path, filename="customer_1")

    assert path == tmp_path / "customer_1.json"
    assert json.loads(path.read_text())["prediction"]["churnProbability"] == pytest.approx(
        sample_result.churn_probability
    )


def test_save_report_default_name(tmp_path, sample_input, sample_result):
    path = save_report(sample_input, sample_result, output_dir=tmp_path / "nested")

    assert path.exists()
    assert path.name.startswith("churn_report_")
    assert path.suffix == ".md"


def test_format_probability():
    assert format_probability(0.5818294) == "58.2%"
    assert format_probability(0.5, precision=0) == "50%"
