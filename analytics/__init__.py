from .cleaning import clean_customers, reset_customers  # noqa: F401
from .dataset import CustomerDataset  # noqa: F401
from .statistics import compute_stats, stats_by_gender  # noqa: F401
