"""
Churn Scorer Module
===================

Closed-form sub-models, meta-model fusion and risk classification.

The Random-Forest-style sub-model is a clamped linear score around a base
probability. The XGBoost-style sub-model uses larger coefficients and is
squashed through a sigmoid. A logistic meta-model fuses both probabilities.
"""

from typing import Optional

import numpy as np

from ..schemas import ChurnInput, ModelParameters, RiskLevel
from .parameters import get_model_parameters


def _sigmoid(x: float) -> float:
    return float(1.0 / (1.0 + np.exp(-x)))


def _clip_probability(p: float) -> float:
    return float(np.clip(p, 0.0, 1.0))


def random_forest_raw_score(data: ChurnInput, params: Optional[ModelParameters] = None) -> float:
    """
    Unclamped score of the Random-Forest-style sub-model.

    Args:
        data: Customer input
        params: Model parameters (defaults to the configured ones)

    Returns:
        Raw score, possibly outside [0, 1]
    """
    params = params or get_model_parameters()
    w = params.random_forest

    score = params.base_probability

    # Any complaint counts the same, regardless of how many
    score += w.complaints * 0.8 if data.complaints > 0 else 0.0

    score -= (data.cashback_amount / 1000) * w.cashback_amount
    score -= (data.tenure / 80) * w.tenure
    score -= (data.satisfaction_score / 15) * w.satisfaction_score

    score -= w.mobile if data.purchased_mobile else 0.0
    score -= w.laptop_accessory if data.purchased_laptop_accessory else 0.0
    score -= w.grocery if data.purchased_grocery else 0.0
    score -= w.other_products if data.purchased_other_products else 0.0

    # Tier 1 adds the largest increment
    score += ((3 - data.city_tier) / 3) * w.city_tier

    return score


def random_forest_probability(data: ChurnInput, params: Optional[ModelParameters] = None) -> float:
    """Random-Forest-style churn probability, clamped to [0, 1]."""
    return _clip_probability(random_forest_raw_score(data, params))


def xgboost_raw_score(data: ChurnInput, params: Optional[ModelParameters] = None) -> float:
    """
    Pre-sigmoid score of the XGBoost-style sub-model.

    Args:
        data: Customer input
        params: Model parameters (defaults to the configured ones)

    Returns:
        Raw logit
    """
    params = params or get_model_parameters()
    w = params.xgboost

    score = 0.0
    score += w.complaints / 10 if data.complaints > 0 else 0.0
    score -= (data.cashback_amount / 1500) * (w.cashback_amount / 10)
    score -= (data.tenure / 100) * (w.tenure / 10)
    score -= (data.satisfaction_score / 15) * (w.satisfaction_score / 10)

    score -= w.mobile / 15 if data.purchased_mobile else 0.0
    score -= w.laptop_accessory / 15 if data.purchased_laptop_accessory else 0.0
    score -= w.grocery / 15 if data.purchased_grocery else 0.0
    score -= w.other_products / 15 if data.purchased_other_products else 0.0

    score += ((3 - data.city_tier) / 3) * (w.city_tier / 15)

    return score


def xgboost_probability(data: ChurnInput, params: Optional[ModelParameters] = None) -> float:
    """XGBoost-style churn probability (sigmoid of the raw score)."""
    return _clip_probability(_sigmoid(xgboost_raw_score(data, params)))


def meta_model_probability(
    rf_probability: float,
    xgb_probability: float,
    params: Optional[ModelParameters] = None
) -> float:
    """
    Fuse the sub-model probabilities with the logistic meta-model.

    The coefficients are calibrated for large logits, so the combination is
    divided by 10 before the sigmoid.

    Args:
        rf_probability: Random-Forest-style probability
        xgb_probability: XGBoost-style probability
        params: Model parameters (defaults to the configured ones)

    Returns:
        Final churn probability
    """
    params = params or get_model_parameters()
    meta = params.meta

    logit = (meta.random_forest * rf_probability + meta.xgboost * xgb_probability) / 10
    return _clip_probability(_sigmoid(logit))


def classify_risk(probability: float, params: Optional[ModelParameters] = None) -> RiskLevel:
    """Convert probability to risk level. Boundaries fall in the lower band."""
    thresholds = (params or get_model_parameters()).thresholds

    if probability > thresholds.high:
        return RiskLevel.HIGH
    elif probability > thresholds.medium:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.LOW
