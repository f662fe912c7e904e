"""
Prediction Report Generator
===========================

Renders a churn prediction as a Markdown or JSON report and saves it to disk.
"""

import json
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from config import REPORTS_DIR
from ..schemas import ChurnInput, ChurnResult
from .helpers import format_probability, get_timestamp

REPORT_FORMATS = {"markdown": ".md", "json": ".json"}

PROFILE_LABELS = {
    "tenure": "Tenure (months)",
    "complaints": "Complaints",
    "cashback_amount": "Cashback Amount",
    "satisfaction_score": "Satisfaction Score",
    "purchased_laptop_accessory": "Laptop & Accessory",
    "purchased_grocery": "Grocery",
    "purchased_other_products": "Other Products",
    "purchased_mobile": "Mobile",
    "city_tier": "City Tier",
}


def render_report(
    data: ChurnInput,
    result: ChurnResult,
    fmt: str = "markdown",
    generated_at: Optional[str] = None
) -> str:
    """
    Render a prediction report.

    Args:
        data: Customer input
        result: Churn result
        fmt: 'markdown' or 'json'
        generated_at: Timestamp to embed (defaults to now)

    Returns:
        Report text
    """
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"Unknown report format: {fmt}. Available: {list(REPORT_FORMATS)}")

    generated_at = generated_at or get_timestamp("%Y-%m-%d %H:%M:%S")

    if fmt == "json":
        payload = {
            "generatedAt": generated_at,
            "customer": data.model_dump(by_alias=True),
            "prediction": result.model_dump(by_alias=True, mode="json"),
        }
        return json.dumps(payload, indent=2)

    lines = [
        "# Customer Churn Prediction Report",
        "",
        f"Generated: {generated_at}",
        "",
        "## Customer Profile",
        "",
        "| Attribute | Value |",
        "|---|---|",
    ]
    for field, label in PROFILE_LABELS.items():
        value = getattr(data, field)
        if isinstance(value, bool):
            value = "Yes" if value else "No"
        lines.append(f"| {label} | {value} |")

    lines += [
        "",
        "## Prediction",
        "",
        f"- Churn probability: {format_probability(result.churn_probability)}",
        f"- Risk level: {result.churn_risk.value.capitalize()}",
        "",
        "## Key Drivers",
        "",
    ]
    lines += [f"{i}. {driver}" for i, driver in enumerate(result.key_drivers, start=1)]
    lines += ["", "## Recommendations", ""]
    lines += [f"- {rec}" for rec in result.recommendations]

    return "\n".join(lines) + "\n"


def save_report(
    data: ChurnInput,
    result: ChurnResult,
    fmt: str = "markdown",
    output_dir: Optional[Union[str, Path]] = None,
    filename: Optional[str] = None
) -> Path:
    """
    Render a prediction report and write it to disk.

    Args:
        data: Customer input
        result: Churn result
        fmt: 'markdown' or 'json'
        output_dir: Target directory (defaults to reports/)
        filename: File stem (defaults to a timestamped name)

    Returns:
        Path to saved report
    """
    content = render_report(data, result, fmt)

    output_dir = Path(output_dir) if output_dir else REPORTS_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    filename = filename or f"churn_report_{get_timestamp()}"
    filepath = output_dir / f"{filename}{REPORT_FORMATS[fmt]}"
    filepath.write_text(content, encoding="utf-8")

    logger.info(f"Saved churn report to {filepath}")
    return filepath
