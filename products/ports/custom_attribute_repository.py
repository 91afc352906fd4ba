"""
Custom attribute repository port (interface).
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from products.domain.custom_attribute import CustomAttribute


class CustomAttributeRepository(ABC):
    """Abstract repository for CustomAttribute entities."""

    @abstractmethod
    async def save(self, attribute: CustomAttribute) -> CustomAttribute:
        """
        Save a custom attribute entity.

        Args:
            attribute: CustomAttribute entity to save

        Returns:
            Saved custom attribute entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, attribute_id: uuid.UUID) -> Optional[CustomAttribute]:
        """
        Find a custom attribute by ID.

        Args:
            attribute_id: CustomAttribute UUID

        Returns:
            CustomAttribute entity or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self, include_deleted: bool = False) -> List[CustomAttribute]:
        """List custom attributes, skipping soft-deleted ones unless asked."""
        pass
