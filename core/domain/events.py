"""
Domain events base classes and infrastructure.

Domain events represent something that happened in the domain.
They are immutable facts recorded after a state change has been
validated and applied; they are never re-validated.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict
from uuid import UUID, uuid4


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    The envelope holds the subject entity id, the entity type tag and the
    firing timestamp. Subclasses add only their own payload fields and
    declare ``entity_type`` at class level, plus ``entity_label`` when the
    audit rendering names the entity differently.
    """

    entity_id: UUID
    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    fired_on: datetime = field(default_factory=utc_now, kw_only=True)

    entity_type: ClassVar[str] = ""
    entity_label: ClassVar[str] = ""
    event_type: ClassVar[str] = "DomainEvent"

    def __init_subclass__(cls, **kwargs):
        """Automatically set event_type for subclasses."""
        super().__init_subclass__(**kwargs)
        cls.event_type = cls.__name__

    @abstractmethod
    def describe(self) -> str:
        """Return the semantic part of the audit rendering."""

    def __str__(self) -> str:
        label = self.entity_label or self.entity_type
        return f"[{self.fired_on.isoformat()}] {label} {self.entity_id} {self.describe()}"

    def payload(self) -> Dict[str, Any]:
        """Return the subtype-specific fields."""
        envelope = {"entity_id", "event_id", "fired_on"}
        return {
            f.name: getattr(self, f.name) for f in fields(self) if f.name not in envelope
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "entity_id": str(self.entity_id),
            "entity_type": self.entity_type,
            "fired_on": self.fired_on.isoformat(),
            "payload": {
                key: str(value) if isinstance(value, UUID) else value
                for key, value in self.payload().items()
            },
        }


class EventHandler(ABC):
    """
    Base class for event handlers.

    Event handlers process domain events asynchronously.
    """

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """
        Handle a domain event.

        Args:
            event: The domain event to handle
        """
        pass


class EventBus(ABC):
    """
    Abstract event bus for publishing and subscribing to domain events.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """
        Subscribe to a domain event type.

        Args:
            event_type: The type of event to subscribe to
            handler: The handler to call when event is published
        """
        pass
