"""
Data models for change notifications published by the customer dataset.
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from .enums import DatasetEventType


class DatasetEvent(BaseModel):
    """Announces that the current customer collection was replaced."""

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    event_type: DatasetEventType
    payload: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=datetime.now)
