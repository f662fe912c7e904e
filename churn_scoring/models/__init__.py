"""Scoring engine models."""

from .explainer import determine_key_drivers, get_driver_impacts
from .parameters import get_model_parameters, load_model_parameters
from .predictor import ChurnPredictor, no_delay, summarize_batch
from .recommender import generate_recommendations
from .scorer import (
    classify_risk,
    meta_model_probability,
    random_forest_probability,
    random_forest_raw_score,
    xgboost_probability,
    xgboost_raw_score,
)

__all__ = [
    "ChurnPredictor",
    "classify_risk",
    "determine_key_drivers",
    "generate_recommendations",
    "get_driver_impacts",
    "get_model_parameters",
    "load_model_parameters",
    "meta_model_probability",
    "no_delay",
    "random_forest_probability",
    "random_forest_raw_score",
    "summarize_batch",
    "xgboost_probability",
    "xgboost_raw_score",
]
