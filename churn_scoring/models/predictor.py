"""
Churn Predictor
===============

Orchestrates the scoring engine behind a simulated asynchronous boundary.
"""

import asyncio
from collections import Counter
from typing import Any, Awaitable, Callable, Iterable, List, Mapping, Optional, Union

import numpy as np
from loguru import logger

from config import get_config
from ..schemas import BatchSummary, ChurnInput, ChurnResult, ModelParameters, RiskLevel, parse_input
from .explainer import determine_key_drivers
from .parameters import get_model_parameters
from .recommender import generate_recommendations
from .scorer import (
    classify_risk,
    meta_model_probability,
    random_forest_probability,
    xgboost_probability,
)

SleepStrategy = Callable[[float], Awaitable[Any]]
InputLike = Union[ChurnInput, Mapping[str, Any]]


async def no_delay(seconds: float) -> None:
    """Sleep strategy that skips the simulated latency."""
    return None


class ChurnPredictor:
    """Score customers and track how many predictions are in flight."""

    def __init__(
        self,
        params: Optional[ModelParameters] = None,
        latency: Optional[float] = None,
        sleep: SleepStrategy = asyncio.sleep,
        config: Optional[dict] = None
    ):
        """
        Initialize ChurnPredictor.

        Args:
            params: Model parameters (defaults to the configured ones)
            latency: Simulated latency in seconds (defaults to config)
            sleep: Coroutine function used to wait out the latency
            config: Configuration dictionary
        """
        self.config = config or get_config()
        self.prediction_config = self.config.get("prediction", {})

        self.params = params or get_model_parameters()
        self.latency = latency if latency is not None else self.prediction_config.get("latency_seconds", 1.5)
        self.max_key_drivers = self.prediction_config.get("max_key_drivers", 3)
        self.max_recommendations = self.prediction_config.get("max_recommendations", 5)

        self._sleep = sleep
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        """Number of predict calls currently pending."""
        return self._in_flight

    @property
    def is_loading(self) -> bool:
        """Whether any prediction is in flight."""
        return self._in_flight > 0

    def score(self, data: InputLike) -> ChurnResult:
        """
        Compute a prediction synchronously, without the simulated latency.

        Args:
            data: Customer input or mapping of its fields

        Returns:
            Churn result

        Raises:
            InvalidInput: If a mapping fails validation
        """
        data = parse_input(data)

        rf_probability = random_forest_probability(data, self.params)
        xgb_probability = xgboost_probability(data, self.params)
        probability = meta_model_probability(rf_probability, xgb_probability, self.params)

        result = ChurnResult(
            churn_probability=probability,
            churn_risk=classify_risk(probability, self.params),
            key_drivers=determine_key_drivers(data, self.params, top_n=self.max_key_drivers),
            recommendations=generate_recommendations(
                data, probability, self.params, limit=self.max_recommendations
            ),
        )

        logger.debug(
            f"Prediction: rf={rf_probability:.4f} xgb={xgb_probability:.4f} "
            f"final={probability:.4f} risk={result.churn_risk.value}"
        )
        return result

    async def predict(self, data: InputLike) -> ChurnResult:
        """
        Make a churn prediction after the simulated latency.

        Overlapping calls are independent; the in-flight counter is advisory
        and does not serialize them.

        Args:
            data: Customer input or mapping of its fields

        Returns:
            Churn result
        """
        data = parse_input(data)

        self._in_flight += 1
        try:
            await self._sleep(self.latency)
            return self.score(data)
        finally:
            self._in_flight -= 1

    async def predict_batch(self, inputs: Iterable[InputLike]) -> List[ChurnResult]:
        """
        Make predictions for several customers concurrently.

        Args:
            inputs: Customer inputs

        Returns:
            Results in input order
        """
        results = await asyncio.gather(*(self.predict(data) for data in inputs))
        logger.info(f"Scored {len(results)} customers")
        return list(results)


def summarize_batch(results: List[ChurnResult], top_n: int = 3) -> BatchSummary:
    """
    Calculate summary statistics for a batch of predictions.

    Args:
        results: Churn results
        top_n: Number of most frequent key drivers to report

    Returns:
        Batch summary
    """
    risks = Counter(r.churn_risk for r in results)
    drivers = Counter(driver for r in results for driver in r.key_drivers)
    avg_prob = float(np.mean([r.churn_probability for r in results])) if results else 0.0

    return BatchSummary(
        total_customers=len(results),
        average_churn_probability=avg_prob,
        high_risk_count=risks[RiskLevel.HIGH],
        medium_risk_count=risks[RiskLevel.MEDIUM],
        low_risk_count=risks[RiskLevel.LOW],
        top_drivers=dict(drivers.most_common(top_n)),
    )
