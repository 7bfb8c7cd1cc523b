"""
Derived statistics over a customer collection.
"""

from collections.abc import Sequence

from models.customer import Customer, DataStats
from models.enums import Gender


def compute_stats(customers: Sequence[Customer]) -> DataStats:
    """Averages and churn rate of the collection; all zeros when it is empty."""
    total = len(customers)
    if total == 0:
        return DataStats.empty()

    return DataStats(
        total_customers=total,
        avg_age=sum(c.age for c in customers) / total,
        avg_income=sum(c.annual_income for c in customers) / total,
        avg_spending_score=sum(c.spending_score for c in customers) / total,
        churn_rate=sum(1 for c in customers if c.churn) / total,
    )


def stats_by_gender(customers: Sequence[Customer]) -> dict[Gender, DataStats]:
    """Per-gender breakdown; genders absent from the collection are omitted."""
    groups: dict[Gender, list[Customer]] = {}
    for customer in customers:
        groups.setdefault(customer.gender, []).append(customer)
    return {gender: compute_stats(members) for gender, members in groups.items()}
