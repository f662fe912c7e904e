"""
Key Driver Explainer
====================

Ranks the customer attributes that contribute most to the fused churn score.
"""

from typing import List, Optional

import numpy as np
import pandas as pd

from ..schemas import ChurnInput, ModelParameters
from .parameters import get_model_parameters

# Driver labels
COMPLAINTS = "Customer Complaints"
CASHBACK = "Cashback Rewards"
TENURE = "Customer Tenure"
SATISFACTION = "Satisfaction Score"
CITY_TIER = "City Tier"
MOBILE = "Mobile Purchase Activity"
TECH = "Tech Product Purchases"


def _combined_weight(feature: str, params: ModelParameters) -> float:
    """Weight of a feature across both sub-models, scaled by the meta-model."""
    return (
        getattr(params.random_forest, feature) * params.meta.random_forest
        + getattr(params.xgboost, feature) * params.meta.xgboost
    )


def get_driver_impacts(data: ChurnInput, params: Optional[ModelParameters] = None) -> pd.DataFrame:
    """
    Compute the signed impact of every applicable driver.

    Cashback, tenure and satisfaction always apply. Complaints, city tier,
    mobile and tech purchases apply only when their condition holds.

    Args:
        data: Customer input
        params: Model parameters (defaults to the configured ones)

    Returns:
        DataFrame with columns factor and impact, in candidate order
    """
    params = params or get_model_parameters()
    drivers = []

    if data.complaints > 0:
        drivers.append((COMPLAINTS, _combined_weight("complaints", params)))

    drivers.append((CASHBACK, (data.cashback_amount / 1000) * _combined_weight("cashback_amount", params)))
    drivers.append((TENURE, (data.tenure / 80) * _combined_weight("tenure", params)))
    drivers.append((SATISFACTION, (data.satisfaction_score / 15) * _combined_weight("satisfaction_score", params)))

    if data.city_tier != 1:
        drivers.append((CITY_TIER, ((3 - data.city_tier) / 3) * _combined_weight("city_tier", params)))

    if data.purchased_mobile:
        drivers.append((MOBILE, _combined_weight("mobile", params)))

    if data.purchased_laptop_accessory:
        drivers.append((TECH, _combined_weight("laptop_accessory", params)))

    return pd.DataFrame(drivers, columns=["factor", "impact"])


def determine_key_drivers(
    data: ChurnInput,
    params: Optional[ModelParameters] = None,
    top_n: int = 3
) -> List[str]:
    """
    Get the top drivers of a prediction.

    Drivers are ranked by absolute impact regardless of direction; ties keep
    candidate order.

    Args:
        data: Customer input
        params: Model parameters (defaults to the configured ones)
        top_n: Number of drivers to return

    Returns:
        List of driver labels
    """
    df = get_driver_impacts(data, params)

    df["abs_impact"] = np.abs(df["impact"])
    df = df.sort_values("abs_impact", ascending=False, kind="stable").head(top_n)

    return df["factor"].tolist()
