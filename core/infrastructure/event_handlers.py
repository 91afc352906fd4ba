"""
Event handlers for domain events.

These handlers process domain events for side effects such as
the audit trail.
"""

import logging
import uuid
from typing import List, Tuple

from core.domain.events import DomainEvent, EventBus, EventHandler

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every domain event to the audit log with its envelope as
    structured fields.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s",
            event,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "entity_id": str(event.entity_id),
                "entity_type": event.entity_type,
                "fired_on": event.fired_on.isoformat(),
            },
        )


class InMemoryEventLog(EventHandler):
    """Append-only event log kept in memory, in arrival order."""

    def __init__(self):
        self._events: List[DomainEvent] = []

    @property
    def events(self) -> Tuple[DomainEvent, ...]:
        return tuple(self._events)

    async def handle(self, event: DomainEvent) -> None:
        self._events.append(event)

    def for_entity(self, entity_id: uuid.UUID) -> List[DomainEvent]:
        """Events recorded for one entity, oldest first."""
        return [event for event in self._events if event.entity_id == entity_id]


def register_event_handlers(bus: EventBus = None) -> None:
    """
    Register the default event handlers.

    Args:
        bus: Event bus to register on (defaults to the global bus)
    """
    if bus is None:
        from core.infrastructure.events import event_bus as bus

    bus.subscribe(DomainEvent, AuditLogEventHandler())
    logger.info("Event handlers registered")
