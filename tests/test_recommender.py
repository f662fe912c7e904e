"""
Churn Scoring - Recommendation Tests
"""

import pytest

from churn_scoring.models import generate_recommendations
from churn_scoring.models.recommender import (
    COMPLAINT_HANDLING,
    EXPERIENCE_IMPROVEMENT,
    FIRST_YEAR_RETENTION,
    GROCERY_OFFER,
    INCREASE_CASHBACK,
    RISK_MESSAGES,
    TECH_PROMOTION,
)
from churn_scoring.schemas import RiskLevel


def test_reference_customer_drops_risk_message(sample_input, params):
    recommendations = generate_recommendations(sample_input, 0.58183, params)

    assert recommendations == [
        COMPLAINT_HANDLING,
        INCREASE_CASHBACK,
        TECH_PROMOTION,
        GROCERY_OFFER,
        "Develop targeted promotions for customers in Tier 2 cities",
    ]
    assert RISK_MESSAGES[RiskLevel.MEDIUM] not in recommendations


def test_every_feature_condition_fires(sample_input, params):
    customer = sample_input.model_copy(
        update={"satisfaction_score": 3, "tenure": 4, "purchased_other_products": False, "city_tier": 3}
    )

    recommendations = generate_recommendations(customer, 0.9, params)

    assert recommendations == [
        COMPLAINT_HANDLING,
        EXPERIENCE_IMPROVEMENT,
        INCREASE_CASHBACK,
        FIRST_YEAR_RETENTION,
        TECH_PROMOTION,
    ]


@pytest.mark.parametrize(
    "probability,risk",
    [(0.95, RiskLevel.HIGH), (0.55, RiskLevel.MEDIUM), (0.2, RiskLevel.LOW), (0.7, RiskLevel.MEDIUM)],
)
def test_risk_message_only(loyal_input, params, probability, risk):
    assert generate_recommendations(loyal_input, probability, params) == [RISK_MESSAGES[risk]]


def test_risk_message_is_last(loyal_input, params):
    customer = loyal_input.model_copy(update={"complaints": 2, "city_tier": 3})

    recommendations = generate_recommendations(customer, 0.9, params)

    assert recommendations == [
        COMPLAINT_HANDLING,
        "Develop targeted promotions for customers in Tier 3 cities",
        RISK_MESSAGES[RiskLevel.HIGH],
    ]


def test_tech_promotion_needs_neither_device(loyal_input, params):
    laptop_only = loyal_input.model_copy(update={"purchased_mobile": False})
    neither = laptop_only.model_copy(update={"purchased_laptop_accessory": False})

    assert TECH_PROMOTION not in generate_recommendations(laptop_only, 0.5, params)
    assert TECH_PROMOTION in generate_recommendations(neither, 0.5, params)


def test_limit_and_uniqueness(sample_input, params):
    recommendations = generate_recommendations(sample_input, 0.5, params, limit=3)

    assert len(recommendations) == 3
    assert len(set(recommendations)) == len(recommendations)


def test_never_empty(loyal_input, params):
    assert generate_recommendations(loyal_input, 0.0, params)
