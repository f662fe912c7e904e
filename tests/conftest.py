"""
Churn Scoring - Pytest Configuration
Shared fixtures for tests.
"""

import sys

import pytest
from loguru import logger

from churn_scoring.models import ChurnPredictor, get_model_parameters, no_delay
from churn_scoring.schemas import ChurnInput


@pytest.fixture
def params():
    """Configured model parameters."""
    return get_model_parameters()


@pytest.fixture
def sample_input() -> ChurnInput:
    """Default customer from the prediction form."""
    return ChurnInput(
        tenure=12,
        complaints=1,
        cashback_amount=150,
        satisfaction_score=7,
        purchased_laptop_accessory=False,
        purchased_grocery=False,
        purchased_other_products=True,
        purchased_mobile=False,
        city_tier=2,
    )


@pytest.fixture
def loyal_input() -> ChurnInput:
    """Long-standing, satisfied customer who triggers no feature recommendation."""
    return ChurnInput(
        tenure=48,
        complaints=0,
        cashback_amount=400,
        satisfaction_score=9,
        purchased_laptop_accessory=True,
        purchased_grocery=True,
        purchased_other_products=False,
        purchased_mobile=True,
        city_tier=1,
    )


@pytest.fixture
def predictor() -> ChurnPredictor:
    """Predictor without simulated latency."""
    return ChurnPredictor(sleep=no_delay)


@pytest.fixture
def reset_logging():
    """Restore the default loguru sink after a test reconfigures logging."""
    yield
    logger.remove()
    logger.add(sys.stderr)
