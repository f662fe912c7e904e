"""
Retention Recommendations
=========================

Turns customer attributes and the churn probability into retention actions.
"""

from typing import List, Optional

from ..schemas import ChurnInput, ModelParameters, RiskLevel
from .parameters import get_model_parameters
from .scorer import classify_risk

COMPLAINT_HANDLING = "Address customer complaints promptly to improve satisfaction"
EXPERIENCE_IMPROVEMENT = "Implement customer experience improvement initiatives"
INCREASE_CASHBACK = "Consider increasing cashback rewards for this customer"
FIRST_YEAR_RETENTION = "Create special retention offers for new customers in their first year"
TECH_PROMOTION = "Offer personalized tech product promotions"
GROCERY_OFFER = "Introduce grocery product offerings to this customer"
CITY_TIER_PROMOTION = "Develop targeted promotions for customers in Tier {tier} cities"

RISK_MESSAGES = {
    RiskLevel.HIGH: "Implement immediate retention strategy including personalized outreach",
    RiskLevel.MEDIUM: "Schedule regular check-ins and satisfaction surveys",
    RiskLevel.LOW: "Continue providing excellent service to maintain customer loyalty",
}


def generate_recommendations(
    data: ChurnInput,
    probability: float,
    params: Optional[ModelParameters] = None,
    limit: int = 5
) -> List[str]:
    """
    Generate recommendations from customer attributes and churn probability.

    Feature-triggered actions come first, followed by one message for the
    risk band. After deduplication the list is cut to ``limit`` entries, so
    the risk-band message is dropped when enough feature actions fired.

    Args:
        data: Customer input
        probability: Final churn probability
        params: Model parameters (defaults to the configured ones)
        limit: Maximum number of recommendations

    Returns:
        Ordered list of unique recommendations
    """
    params = params or get_model_parameters()
    recommendations = []

    if data.complaints > 0:
        recommendations.append(COMPLAINT_HANDLING)

    if data.satisfaction_score < 7:
        recommendations.append(EXPERIENCE_IMPROVEMENT)

    if data.cashback_amount < 200:
        recommendations.append(INCREASE_CASHBACK)

    if data.tenure < 12:
        recommendations.append(FIRST_YEAR_RETENTION)

    if not data.purchased_laptop_accessory and not data.purchased_mobile:
        recommendations.append(TECH_PROMOTION)

    if not data.purchased_grocery:
        recommendations.append(GROCERY_OFFER)

    if data.city_tier > 1:
        recommendations.append(CITY_TIER_PROMOTION.format(tier=data.city_tier))

    recommendations.append(RISK_MESSAGES[classify_risk(probability, params)])

    unique = list(dict.fromkeys(recommendations))
    return unique[:limit]
