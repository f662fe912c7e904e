"""
Prediction Script
=================

Command-line script to score one customer or a whole customer table.

Usage:
    python scripts/predict.py --tenure 12 --complaints 1 --cashback 150 --satisfaction 7 --other --city-tier 2
    python scripts/predict.py --file customers.csv --skip-invalid
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from config import get_config
from churn_scoring import ChurnPredictor, InvalidInput, parse_input, summarize_batch
from churn_scoring.data import CustomerPreprocessor, DataLoader
from churn_scoring.models import no_delay
from churn_scoring.utils import format_probability, save_report, setup_logging


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Estimate customer churn risk")

    parser.add_argument("--file", type=str, help="Customer table to score (CSV, Excel or Parquet)")
    parser.add_argument("--skip-invalid", action="store_true", help="Skip invalid rows in --file")

    parser.add_argument("--tenure", type=int, default=12, help="Tenure in months")
    parser.add_argument("--complaints", type=int, default=0, help="Number of complaints")
    parser.add_argument("--cashback", type=float, default=150.0, help="Cashback amount")
    parser.add_argument("--satisfaction", type=int, default=7, help="Satisfaction score (1-10)")
    parser.add_argument("--city-tier", type=int, default=1, choices=[1, 2, 3], help="City tier")
    parser.add_argument("--laptop", action="store_true", help="Purchased laptops or accessories")
    parser.add_argument("--grocery", action="store_true", help="Purchased groceries")
    parser.add_argument("--other", action="store_true", help="Purchased other products")
    parser.add_argument("--mobile", action="store_true", help="Purchased mobile phones")

    parser.add_argument(
        "--report",
        type=str,
        choices=["markdown", "json"],
        help="Save a prediction report in the given format"
    )
    parser.add_argument("--no-delay", action="store_true", help="Skip the simulated latency")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (defaults to the configured level)"
    )

    return parser.parse_args()


def score_file(predictor: ChurnPredictor, args, config: dict) -> int:
    """Score every customer in a table and print a summary."""
    df = DataLoader(config).load_customers(args.file)
    inputs = CustomerPreprocessor(config).to_inputs(df, skip_invalid=args.skip_invalid)

    results = asyncio.run(predictor.predict_batch(inputs))
    summary = summarize_batch(results)

    print(f"Customers scored:      {summary.total_customers}")
    print(f"Average churn risk:    {format_probability(summary.average_churn_probability)}")
    print(f"High / Medium / Low:   {summary.high_risk_count} / {summary.medium_risk_count} / {summary.low_risk_count}")
    for driver, count in summary.top_drivers.items():
        print(f"  {driver}: {count}")
    return 0


def score_customer(predictor: ChurnPredictor, args) -> int:
    """Score a single customer described by command-line flags."""
    data = parse_input({
        "tenure": args.tenure,
        "complaints": args.complaints,
        "cashback_amount": args.cashback,
        "satisfaction_score": args.satisfaction,
        "purchased_laptop_accessory": args.laptop,
        "purchased_grocery": args.grocery,
        "purchased_other_products": args.other,
        "purchased_mobile": args.mobile,
        "city_tier": args.city_tier,
    })

    logger.info("Running prediction...")
    result = asyncio.run(predictor.predict(data))

    print(f"Churn probability: {format_probability(result.churn_probability)}")
    print(f"Risk level:        {result.churn_risk.value.capitalize()}")
    print("Key drivers:")
    for driver in result.key_drivers:
        print(f"  - {driver}")
    print("Recommendations:")
    for rec in result.recommendations:
        print(f"  - {rec}")

    if args.report:
        path = save_report(data, result, fmt=args.report)
        print(f"Report saved to {path}")
    return 0


def main():
    """Main prediction function."""
    args = parse_args()
    config = get_config()

    setup_logging(config, level=args.log_level)

    predictor = ChurnPredictor(config=config, sleep=no_delay if args.no_delay else asyncio.sleep)

    try:
        if args.file:
            return score_file(predictor, args, config)
        return score_customer(predictor, args)
    except InvalidInput as e:
        logger.error(str(e))
        return 2
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
