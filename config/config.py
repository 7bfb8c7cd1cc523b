"""
Configuration classes for the customer-behavior analytics project.
Defines generation and cleaning parameters in a type-safe, extensible way.
"""

import os
from dataclasses import dataclass

from utils.env import load_project_dotenv

DATASET_SIZE_ENV = "CUSTOMER_DATASET_SIZE"
DATASET_SEED_ENV = "CUSTOMER_DATASET_SEED"


@dataclass
class CustomerGenerationConfig:
    count: int = 200
    # Half-open [low, high) ranges, as drawn by numpy's Generator.integers
    age_range: tuple[int, int] = (18, 70)
    income_range: tuple[int, int] = (15, 140)  # thousands
    spending_score_range: tuple[int, int] = (1, 101)
    # Churn heuristic: older low spenders and young very low spenders
    senior_age: int = 50
    senior_max_score: int = 40
    young_age: int = 30
    young_max_score: int = 20
    # Flat chance of flagging churn regardless of the heuristic (demo noise)
    churn_noise_probability: float = 0.2
    segment: str = "General"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "CustomerGenerationConfig":
        """Build a config, overriding count/seed from the environment or `.env`."""
        load_project_dotenv()
        config = cls()
        size = os.getenv(DATASET_SIZE_ENV)
        if size:
            try:
                config.count = int(size)
            except ValueError as e:
                raise ValueError(f"{DATASET_SIZE_ENV} must be an integer, got {size!r}") from e
        seed = os.getenv(DATASET_SEED_ENV)
        if seed:
            try:
                config.seed = int(seed)
            except ValueError as e:
                raise ValueError(f"{DATASET_SEED_ENV} must be an integer, got {seed!r}") from e
        return config


@dataclass
class DataCleaningConfig:
    # Records must be strictly above both thresholds to survive cleaning
    min_spending_score: int = 5
    min_annual_income: int = 10  # thousands


# Example usage:
# gen_config = CustomerGenerationConfig.from_env()
# clean_config = DataCleaningConfig(min_spending_score=10)
