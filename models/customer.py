"""
Customer records and the statistics derived from a collection of them.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import Gender

DEFAULT_SEGMENT = "General"


class Customer(BaseModel):
    """
    Data model for a single customer-behavior record.
    Immutable once created; value ranges are enforced by the generator, not here.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    gender: Gender
    age: int
    annual_income: int  # in thousands
    spending_score: int  # 1-100
    churn: bool
    segment: str = DEFAULT_SEGMENT  # reserved, segmentation is not computed


class DataStats(BaseModel):
    """Aggregate statistics over the current customer collection"""

    model_config = ConfigDict(frozen=True)

    total_customers: int = 0
    avg_age: float = 0.0
    avg_income: float = 0.0
    avg_spending_score: float = 0.0
    churn_rate: float = 0.0

    @classmethod
    def empty(cls) -> "DataStats":
        return cls()


class CleanResult(BaseModel):
    """Outcome of a cleaning pass: surviving records and how many were dropped."""

    model_config = ConfigDict(frozen=True)

    customers: tuple[Customer, ...]
    removed_count: int = Field(ge=0)

    @property
    def message(self) -> str:
        return (
            "Data Cleaning Processed: "
            f"Removed {self.removed_count} outlier/incomplete records."
        )
