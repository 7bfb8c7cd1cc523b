"""
State container for the customer collection shown by the dashboard views.
"""

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
import pandas as pd
from pydantic import TypeAdapter

from config.config import CustomerGenerationConfig, DataCleaningConfig
from models.customer import CleanResult, Customer, DataStats
from models.enums import DatasetEventType, Gender
from models.events import DatasetEvent
from utils.data_generation import customers_to_dataframe, generate_customers
from utils.event_bus import EventBus

from .cleaning import clean_customers, reset_customers
from .statistics import compute_stats, stats_by_gender

logger = logging.getLogger(__name__)

_collection_adapter = TypeAdapter(tuple[Customer, ...])


class CustomerDataset:
    """
    Owns the original and current customer collections.

    The original collection is fixed at generation; the current one starts equal to it,
    is narrowed by ``clean`` and restored by ``reset``. Both are only ever replaced
    wholesale, and statistics are derived from the current collection on every read.
    Every mutation is announced on the event bus.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        generation_config: CustomerGenerationConfig | None = None,
        cleaning_config: DataCleaningConfig | None = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.generation_config = generation_config or CustomerGenerationConfig()
        self.cleaning_config = cleaning_config or DataCleaningConfig()
        self._original: tuple[Customer, ...] = ()
        self._current: tuple[Customer, ...] = ()

    @property
    def original(self) -> tuple[Customer, ...]:
        return self._original

    @property
    def current(self) -> tuple[Customer, ...]:
        return self._current

    @property
    def stats(self) -> DataStats:
        return compute_stats(self._current)

    def stats_by_gender(self) -> dict[Gender, DataStats]:
        return stats_by_gender(self._current)

    def to_dataframe(self) -> pd.DataFrame:
        return customers_to_dataframe(self._current)

    def generate(
        self, count: int | None = None, rng: np.random.Generator | None = None
    ) -> tuple[Customer, ...]:
        """Replace both collections with freshly generated records."""
        customers = tuple(generate_customers(count, rng=rng, config=self.generation_config))
        self._original = customers
        self._current = customers
        self._notify(DatasetEventType.GENERATED)
        return customers

    def load(self, customers: Sequence[Customer]) -> tuple[Customer, ...]:
        """
        Adopt an externally built collection as the original, e.g. fixed test data.
        Records are validated before any state changes; ids must be unique.

        Raises:
            pydantic.ValidationError: If an element is not a valid customer record.
            ValueError: If two records share an id.
        """
        validated = _collection_adapter.validate_python(tuple(customers))
        ids = [c.id for c in validated]
        if len(set(ids)) != len(ids):
            raise ValueError("Customer ids must be unique within a collection")
        self._original = validated
        self._current = self._original
        self._notify(DatasetEventType.GENERATED)
        return self._current

    def clean(self) -> CleanResult:
        """Narrow the current collection; the original is kept for ``reset``."""
        result = clean_customers(self._current, self.cleaning_config)
        self._current = result.customers
        logger.info(
            f"Cleaning removed {result.removed_count} records, {len(result.customers)} remain."
        )
        self._notify(DatasetEventType.CLEANED, removed_count=result.removed_count)
        return result

    def reset(self) -> tuple[Customer, ...]:
        """Restore the current collection to the original generated one."""
        self._current = reset_customers(self._original)
        logger.info(f"Dataset reset to {len(self._current)} original records.")
        self._notify(DatasetEventType.RESET)
        return self._current

    def _notify(self, event_type: DatasetEventType, **extra: Any) -> None:
        stats = self.stats
        payload = {
            "total_customers": stats.total_customers,
            "stats": stats.model_dump(),
            **extra,
        }
        self.event_bus.publish(DatasetEvent(event_type=event_type, payload=payload))
