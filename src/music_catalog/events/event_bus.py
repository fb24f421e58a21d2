"""
Event Bus - Delivery of catalog events to interested code.

The catalog repository is synchronous and only records events; the bus is
where they get delivered. Handlers subscribe to one concrete event class
and are awaited one after another, in subscription order, for each event.
"""

import asyncio
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Deque, Dict, List, Optional, Type, TypeVar
from uuid import uuid4

from ..domain.catalog.repositories import CatalogRepository

logger = logging.getLogger(__name__)


T = TypeVar('T', bound='DomainEvent')


@dataclass
class DomainEvent:
    """Base class for all catalog events."""
    event_id: str = field(default_factory=lambda: f"evt_{uuid4().hex}")
    timestamp: datetime = field(default_factory=datetime.now)
    aggregate_id: Optional[str] = None
    aggregate_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_type": self.__class__.__name__,
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Get event-specific data for serialization."""
        return {}


class EventBus:
    """
    Delivers catalog events to subscribed handlers.

    Handlers may be plain functions or coroutine functions. A handler that
    raises is logged and skipped; the remaining handlers still run. The
    most recent ``max_events_in_memory`` published events are kept for
    inspection through ``get_events``.
    """

    def __init__(self, max_events_in_memory: int = 1000):
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], Any]]] = {}
        self._history: Deque[DomainEvent] = deque(maxlen=max_events_in_memory)

    def subscribe(self, event_type: Type[T], handler: Callable[[T], Any]) -> None:
        """Call ``handler`` for every published event of exactly ``event_type``."""
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: Type[DomainEvent], handler: Callable) -> None:
        """Stop calling ``handler`` for ``event_type``. Unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver one event to its subscribers."""
        self._history.append(event)
        for handler in list(self._handlers.get(type(event), [])):
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                logger.exception("Error in event handler %r for %s", handler, type(event).__name__)

    async def publish_batch(self, events: List[DomainEvent]) -> int:
        """Deliver events in order. Returns how many were published."""
        for event in events:
            await self.publish(event)
        return len(events)

    async def publish_pending(self, repository: CatalogRepository) -> int:
        """Pull the repository's recorded events and deliver them."""
        return await self.publish_batch(repository.pull_events())

    def get_events(
        self,
        aggregate_id: Optional[str] = None,
        event_type: Optional[Type[DomainEvent]] = None,
        since: Optional[datetime] = None,
    ) -> List[DomainEvent]:
        """Get published events, oldest first, with optional filtering."""
        events = list(self._history)

        if aggregate_id:
            events = [e for e in events if e.aggregate_id == aggregate_id]

        if event_type:
            events = [e for e in events if isinstance(e, event_type)]

        if since:
            events = [e for e in events if e.timestamp >= since]

        return events

    def clear(self) -> None:
        """Drop all subscriptions and published history."""
        self._handlers.clear()
        self._history.clear()
