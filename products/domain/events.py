"""
Product domain events.

Domain events represent something that happened in the product domain.
"""
import uuid
from dataclasses import dataclass
from typing import ClassVar

from core.domain.events import DomainEvent


@dataclass(frozen=True)
class ProductEanCodeChanged(DomainEvent):
    """Event raised when a product EAN code is changed."""

    entity_type: ClassVar[str] = "Product"

    ean_code: str

    @property
    def product_id(self) -> uuid.UUID:
        return self.entity_id

    def describe(self) -> str:
        return f"EAN changed to {self.ean_code}"


@dataclass(frozen=True)
class CustomAttributeUnitOfMeasureSet(DomainEvent):
    """Event raised when a custom attribute unit of measure is set."""

    entity_type: ClassVar[str] = "CustomAttribute"
    entity_label: ClassVar[str] = "Attribute"

    unit_of_measure: str

    @property
    def attribute_id(self) -> uuid.UUID:
        return self.entity_id

    def describe(self) -> str:
        return f"unit of measure set to {self.unit_of_measure}"
