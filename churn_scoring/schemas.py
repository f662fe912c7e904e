"""
Scoring Schemas (Pydantic Models)
=================================

Data validation models for churn scoring inputs, results and model parameters.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .exceptions import InvalidInput


class RiskLevel(str, Enum):
    """Discrete churn risk band."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ChurnInput(BaseModel):
    """Schema for per-customer scoring input."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        json_schema_extra={
            "example": {
                "tenure": 12,
                "complaints": 1,
                "cashbackAmount": 150,
                "satisfactionScore": 7,
                "purchasedLaptopAccessory": False,
                "purchasedGrocery": False,
                "purchasedOtherProducts": True,
                "purchasedMobile": False,
                "cityTier": 2,
            }
        },
    )

    tenure: int = Field(..., ge=0, description="Months since customer joined")
    complaints: int = Field(..., ge=0, description="Number of complaints filed")
    cashback_amount: float = Field(..., ge=0, description="Total cashback amount received")
    satisfaction_score: int = Field(..., ge=1, le=10, description="Satisfaction score (1-10)")
    purchased_laptop_accessory: bool = Field(False, description="Bought laptops or accessories")
    purchased_grocery: bool = Field(False, description="Bought groceries")
    purchased_other_products: bool = Field(False, description="Bought other products")
    purchased_mobile: bool = Field(False, description="Bought mobile phones")
    city_tier: int = Field(..., ge=1, le=3, description="City tier (1 = most developed)")


class ChurnResult(BaseModel):
    """Schema for a single churn prediction."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    churn_probability: float = Field(..., ge=0, le=1, description="Probability of churn")
    churn_risk: RiskLevel = Field(..., description="Risk level category")
    key_drivers: List[str] = Field(default_factory=list, description="Top contributing factors")
    recommendations: List[str] = Field(default_factory=list, description="Retention actions")


class WeightSet(BaseModel):
    """Per-feature coefficients of one sub-model."""

    model_config = ConfigDict(frozen=True)

    complaints: float
    cashback_amount: float
    tenure: float
    satisfaction_score: float
    mobile: float
    laptop_accessory: float
    city_tier: float
    grocery: float
    other_products: float


class MetaCoefficients(BaseModel):
    """Meta-model coefficients applied to the sub-model probabilities."""

    model_config = ConfigDict(frozen=True)

    random_forest: float
    xgboost: float


class Thresholds(BaseModel):
    """Probability cut points for the risk bands."""

    model_config = ConfigDict(frozen=True)

    high: float = 0.7
    medium: float = 0.4


class ModelParameters(BaseModel):
    """Complete, immutable parameter set of the scoring engine."""

    model_config = ConfigDict(frozen=True)

    base_probability: float = 0.3
    random_forest: WeightSet
    xgboost: WeightSet
    meta: MetaCoefficients
    thresholds: Thresholds = Field(default_factory=Thresholds)


class BatchSummary(BaseModel):
    """Schema for batch scoring statistics."""

    total_customers: int
    average_churn_probability: float
    high_risk_count: int
    medium_risk_count: int
    low_risk_count: int
    top_drivers: Dict[str, int]


def parse_input(data: Union[ChurnInput, Mapping[str, Any]]) -> ChurnInput:
    """
    Validate raw input at the engine boundary.

    Args:
        data: ChurnInput instance or mapping with snake_case or camelCase keys

    Returns:
        Validated ChurnInput

    Raises:
        InvalidInput: If a field is missing or outside its domain
    """
    if isinstance(data, ChurnInput):
        return data

    if not isinstance(data, Mapping):
        raise InvalidInput("input", "expected a mapping")

    try:
        return ChurnInput.model_validate(dict(data))
    except ValidationError as e:
        error = e.errors()[0]
        # Report the field name even when the caller used a camelCase key
        aliases = {info.alias: name for name, info in ChurnInput.model_fields.items()}
        loc = str(error["loc"][0]) if error["loc"] else "input"
        field = aliases.get(loc, loc)
        raise InvalidInput(field, error["msg"]) from e
