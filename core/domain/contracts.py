"""
Capability contracts shared across aggregates and events.

Aggregates and events do not share a base class for these concerns;
they satisfy these protocols structurally.
"""
import uuid
from datetime import datetime
from typing import List, Protocol, runtime_checkable

from core.domain.events import DomainEvent


@runtime_checkable
class HasIdentifier(Protocol):
    """Anything with a stable identity, e.g. an aggregate root."""

    @property
    def id(self) -> uuid.UUID:
        ...


@runtime_checkable
class HasFiringTimestamp(Protocol):
    """Anything stamped with the moment it happened."""

    @property
    def fired_on(self) -> datetime:
        ...


@runtime_checkable
class RecordsEvents(Protocol):
    """Aggregate that buffers the events its operations fire."""

    def collect_events(self) -> List[DomainEvent]:
        ...
