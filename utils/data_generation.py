import logging

import numpy as np
import pandas as pd

from config.config import CustomerGenerationConfig
from models.customer import Customer
from models.enums import Gender

logger = logging.getLogger(__name__)

CUSTOMER_COLUMNS = list(Customer.model_fields)


def _check_range(name: str, bounds: tuple[int, int]) -> None:
    low, high = bounds
    if high <= low:
        raise ValueError(f"{name} must be a non-empty [low, high) range, got {bounds}")


def is_heuristic_churn(age: int, spending_score: int, config: CustomerGenerationConfig) -> bool:
    """Churn flag implied by age and spending score alone, before noise."""
    return (age > config.senior_age and spending_score < config.senior_max_score) or (
        age < config.young_age and spending_score < config.young_max_score
    )


def generate_customers(
    count: int | None = None,
    rng: np.random.Generator | None = None,
    config: CustomerGenerationConfig | None = None,
) -> list[Customer]:
    """
    Generates synthetic customer-behavior records.

    Args:
        count: Number of records; defaults to ``config.count``. Zero yields an empty list.
        rng: Random source. When omitted, ``np.random.default_rng(config.seed)`` is used.
        config: Value ranges, churn heuristic thresholds and noise probability.

    Returns:
        Records with 1-based sequential ids in generation order. Churn is the age/score
        heuristic, additionally forced true with ``config.churn_noise_probability``.

    Raises:
        TypeError: If count is not an integer.
        ValueError: If count is negative or the config holds an invalid range/probability.
    """
    config = config or CustomerGenerationConfig()
    if count is None:
        count = config.count
    if isinstance(count, bool) or not isinstance(count, int | np.integer):
        raise TypeError(f"count must be an integer, got {type(count).__name__}")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    _check_range("age_range", config.age_range)
    _check_range("income_range", config.income_range)
    _check_range("spending_score_range", config.spending_score_range)
    if not 0.0 <= config.churn_noise_probability <= 1.0:
        raise ValueError(
            f"churn_noise_probability must be within [0, 1], got {config.churn_noise_probability}"
        )

    rng = rng if rng is not None else np.random.default_rng(config.seed)

    customers = []
    for i in range(int(count)):
        age = int(rng.integers(*config.age_range))
        income = int(rng.integers(*config.income_range))
        spending = int(rng.integers(*config.spending_score_range))
        gender = Gender.FEMALE if rng.random() < 0.5 else Gender.MALE
        churn = is_heuristic_churn(age, spending, config)
        # Noise is drawn for every record so the stream stays aligned across records
        if rng.random() < config.churn_noise_probability:
            churn = True
        customers.append(
            Customer(
                id=i + 1,
                gender=gender,
                age=age,
                annual_income=income,
                spending_score=spending,
                churn=churn,
                segment=config.segment,
            )
        )

    logger.info(f"Generated {len(customers)} synthetic customer records.")
    return customers


def customers_to_dataframe(customers) -> pd.DataFrame:
    """Tabular view of the records for charting; an empty input keeps the columns."""
    if not customers:
        return pd.DataFrame(columns=CUSTOMER_COLUMNS)
    return pd.DataFrame([c.model_dump(mode="json") for c in customers], columns=CUSTOMER_COLUMNS)
