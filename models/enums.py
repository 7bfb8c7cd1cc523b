"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class Gender(str, Enum):
    """Gender categories recorded for a customer"""

    MALE = "Male"
    FEMALE = "Female"


class DatasetEventType(str, Enum):
    """Changes announced by the customer dataset to its consumers"""

    GENERATED = "generated"
    CLEANED = "cleaned"
    RESET = "reset"


class DashboardView(str, Enum):
    """Views of the analytics dashboard that consume the dataset"""

    DASHBOARD = "DASHBOARD"
    DATA_MANAGEMENT = "DATA_MANAGEMENT"
    INSIGHTS = "INSIGHTS"
