"""
Churn Scoring Engine
====================

Estimates the churn probability of an e-commerce customer, classifies the
risk, ranks the contributing factors and suggests retention actions.

Modules:
    - schemas: Input, result and parameter models
    - models: Sub-models, meta-model fusion, drivers, recommendations, predictor
    - data: Customer table loading and preparation for batch scoring
    - utils: Logging setup and prediction reports
"""

from .exceptions import InvalidInput
from .models import ChurnPredictor, summarize_batch
from .schemas import ChurnInput, ChurnResult, RiskLevel, parse_input

__version__ = "1.0.0"

__all__ = [
    "ChurnInput",
    "ChurnPredictor",
    "ChurnResult",
    "InvalidInput",
    "RiskLevel",
    "parse_input",
    "summarize_batch",
]
