"""
Synchronous event bus used to notify dataset consumers of changes.
"""

import logging
from collections.abc import Callable

from models.enums import DatasetEventType
from models.events import DatasetEvent

logger_event_bus = logging.getLogger(__name__)

DatasetListener = Callable[[DatasetEvent], None]


class EventBus:
    """Delivers dataset events to subscribers, one at a time, in subscription order."""

    def __init__(self):
        self.subscribers: dict[DatasetEventType, list[DatasetListener]] = {}

    def subscribe(self, event_type: DatasetEventType, callback: DatasetListener) -> None:
        """Subscribe to an event type."""
        if not callable(callback):
            raise TypeError("Callback must be callable.")
        listeners = self.subscribers.setdefault(event_type, [])
        if callback in listeners:
            logger_event_bus.warning(f"Callback {_name(callback)} already subscribed to {event_type.value}")
            return
        listeners.append(callback)
        logger_event_bus.debug(f"Callback {_name(callback)} subscribed to {event_type.value}")

    def subscribe_all(self, callback: DatasetListener) -> None:
        """Subscribe one callback to every dataset event type."""
        for event_type in DatasetEventType:
            self.subscribe(event_type, callback)

    def unsubscribe(self, event_type: DatasetEventType, callback: DatasetListener) -> None:
        """Unsubscribe a specific callback from an event type."""
        if event_type not in self.subscribers:
            return
        try:
            self.subscribers[event_type].remove(callback)
        except ValueError:
            logger_event_bus.warning(f"Callback {_name(callback)} not found for event type {event_type.value}")
            return
        logger_event_bus.debug(f"Callback {_name(callback)} unsubscribed from {event_type.value}")
        if not self.subscribers[event_type]:
            del self.subscribers[event_type]

    def publish(self, event: DatasetEvent) -> int:
        """
        Publish an event to its subscribers.
        A failing subscriber is logged and skipped; returns how many callbacks succeeded.
        """
        if not isinstance(event, DatasetEvent):
            logger_event_bus.error(f"Attempted to publish invalid event type: {type(event)}")
            return 0

        logger_event_bus.info(f"Event published: {event.event_type.value}")
        delivered = 0
        # Copy so callbacks may unsubscribe themselves while being notified
        for callback in list(self.subscribers.get(event.event_type, [])):
            try:
                callback(event)
            except Exception as e:
                logger_event_bus.error(
                    f"Error in subscriber callback '{_name(callback)}' for event {event.event_type.value}: {e}"
                )
                continue
            delivered += 1
        return delivered


def _name(callback: DatasetListener) -> str:
    return getattr(callback, "__name__", type(callback).__name__)
