"""
Custom attribute domain entity.

Custom attributes describe extra product properties (weight, size,
material, ...) and may carry a unit of measure.
"""
import uuid
from typing import List, Optional

from core.domain.events import DomainEvent
from core.domain.exceptions import InvalidStateError
from core.domain.guards import ensure_not_empty
from products.domain.events import CustomAttributeUnitOfMeasureSet


class CustomAttribute:
    """Custom attribute aggregate root."""

    def __init__(
        self,
        id: uuid.UUID,
        name: str,
        data_type: str,
        unit_of_measure: Optional[str] = None,
        deleted: bool = False,
    ):
        self._id = id
        self._name = name
        self._data_type = data_type
        self._unit_of_measure = unit_of_measure
        self._deleted = deleted
        self._events: List[DomainEvent] = []

    @classmethod
    def create(
        cls, name: str, data_type: str, attribute_id: Optional[uuid.UUID] = None
    ) -> "CustomAttribute":
        """
        Create a new CustomAttribute entity.

        Raises:
            InvalidArgumentError: If name or data_type is empty
        """
        ensure_not_empty(name, "name")
        ensure_not_empty(data_type, "data_type")
        return cls(id=attribute_id or uuid.uuid4(), name=name, data_type=data_type)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def data_type(self) -> str:
        return self._data_type

    @property
    def unit_of_measure(self) -> Optional[str]:
        return self._unit_of_measure

    @property
    def deleted(self) -> bool:
        return self._deleted

    def change_name(self, name: str) -> None:
        self._name = ensure_not_empty(name, "name")

    def set_unit_of_measure(self, unit_of_measure: str) -> None:
        """Set the unit of measure and record CustomAttributeUnitOfMeasureSet."""
        self._unit_of_measure = ensure_not_empty(unit_of_measure, "unit_of_measure")
        self._events.append(CustomAttributeUnitOfMeasureSet(self._id, unit_of_measure))

    def delete(self) -> None:
        if self._deleted:
            raise InvalidStateError("The attribute is already deleted")
        self._deleted = True

    def restore(self) -> None:
        if not self._deleted:
            raise InvalidStateError("The attribute is not deleted")
        self._deleted = False

    def collect_events(self) -> List[DomainEvent]:
        """Return the recorded events and clear the buffer."""
        events, self._events = self._events, []
        return events

    def __eq__(self, other):
        if not isinstance(other, CustomAttribute):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)
