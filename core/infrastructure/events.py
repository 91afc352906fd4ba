"""
In-memory event bus implementation.

This is a simple in-memory implementation suitable for modular monolith.
Durable storage and cross-process dispatch are left to an external broker.
"""

import asyncio
import logging
from typing import Dict, Iterable, List, Type

from core.domain.contracts import RecordsEvents
from core.domain.events import DomainEvent, EventBus, EventHandler
from core.metrics import domain_event_handler_failures_total, domain_events_published_total

logger = logging.getLogger(__name__)


class InMemoryEventBus(EventBus):
    """
    In-memory event bus implementation.

    Handlers subscribed to an event type are called for events of that
    type and of its subclasses. A failing handler does not stop the
    others.
    """

    def __init__(self):
        """Initialize the event bus."""
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe to a domain event type.

        Args:
            event_type: The type of event to subscribe to
            handler: The handler to call when event is published
        """
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)
        logger.debug(f"Subscribed {handler.__class__.__name__} to {event_type.__name__}")

    def handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        """Return the handlers subscribed to the event's type or a base type."""
        handlers: List[EventHandler] = []
        for event_type, subscribed in self._handlers.items():
            if isinstance(event, event_type):
                handlers.extend(subscribed)
        return handlers

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        handlers = self.handlers_for(event)
        domain_events_published_total.labels(event_type=event.event_type).inc()

        if not handlers:
            logger.debug(f"No handlers registered for {event.event_type}")
            return

        logger.info(f"Publishing {event.event_type} to {len(handlers)} handler(s)")

        tasks = [self._handle_event(handler, event) for handler in handlers]
        await asyncio.gather(*tasks, return_exceptions=True)

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events one after the other, in order."""
        for event in events:
            await self.publish(event)

    async def publish_from(self, aggregate: RecordsEvents) -> None:
        """Publish and clear the events an aggregate has recorded."""
        await self.publish_all(aggregate.collect_events())

    async def _handle_event(self, handler: EventHandler, event: DomainEvent) -> None:
        """
        Handle an event with a specific handler.

        Args:
            handler: The handler to use
            event: The event to handle
        """
        try:
            await handler.handle(event)
            logger.debug(
                f"Successfully handled {event.event_type} with {handler.__class__.__name__}"
            )
        except Exception as e:
            domain_event_handler_failures_total.labels(
                event_type=event.event_type,
                handler=handler.__class__.__name__,
            ).inc()
            logger.error(
                f"Error handling {event.event_type} with {handler.__class__.__name__}: {e}",
                exc_info=True,
            )
            raise


# Global event bus instance
event_bus = InMemoryEventBus()
