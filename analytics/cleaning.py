"""
Naive data cleaning: drops records under the minimum income/spending thresholds.
"""

from collections.abc import Sequence

from config.config import DataCleaningConfig
from models.customer import CleanResult, Customer


def passes_cleaning(customer: Customer, config: DataCleaningConfig) -> bool:
    return (
        customer.spending_score > config.min_spending_score
        and customer.annual_income > config.min_annual_income
    )


def clean_customers(
    customers: Sequence[Customer], config: DataCleaningConfig | None = None
) -> CleanResult:
    """Keep records strictly above both thresholds, preserving their order."""
    config = config or DataCleaningConfig()
    kept = tuple(c for c in customers if passes_cleaning(c, config))
    return CleanResult(customers=kept, removed_count=len(customers) - len(kept))


def reset_customers(original: Sequence[Customer]) -> tuple[Customer, ...]:
    """The original generated collection, unmodified."""
    return tuple(original)
