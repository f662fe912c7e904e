"""
Model Parameters
================

Loads the fixed weight tables, meta-model coefficients and risk thresholds.
"""

from functools import lru_cache
from typing import Optional

from loguru import logger

from config import get_config
from ..schemas import ModelParameters


def load_model_parameters(config: Optional[dict] = None) -> ModelParameters:
    """
    Build validated model parameters from a configuration dictionary.

    Args:
        config: Configuration dictionary. If None, loads from config.yaml

    Returns:
        Frozen ModelParameters
    """
    config = config or get_config()
    params = ModelParameters.model_validate(config.get("model", {}))
    logger.debug(
        f"Loaded model parameters (meta={params.meta.random_forest:.4f}/"
        f"{params.meta.xgboost:.4f}, thresholds={params.thresholds.medium}/{params.thresholds.high})"
    )
    return params


@lru_cache(maxsize=1)
def get_model_parameters() -> ModelParameters:
    """Get the process-wide model parameters, loaded once."""
    return load_model_parameters()
