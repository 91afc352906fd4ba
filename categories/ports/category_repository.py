"""
Category repository port (interface).

This defines the contract for category persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from categories.domain.category import Category


class CategoryRepository(ABC):
    """
    Abstract repository for Category entities.

    Categories are returned linked into their tree: ``parent`` and
    ``children`` are populated.
    """

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """
        Save a category and the subtree below it.

        The parent, if any, must already be saved.

        Args:
            category: Category entity to save

        Returns:
            Saved category entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: uuid.UUID) -> Optional[Category]:
        """
        Find a category by ID.

        Args:
            category_id: Category UUID

        Returns:
            Category entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: str) -> Optional[Category]:
        """
        Find a category by code.

        Args:
            code: Category unique code

        Returns:
            Category entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_url(self, url: str) -> Optional[Category]:
        """
        Find a category by url.

        Args:
            url: Category url (unique slug)

        Returns:
            Category entity or None if not found
        """
        pass

    @abstractmethod
    async def list_roots(self) -> List[Category]:
        """
        List categories without a parent.

        Returns:
            List of root Category entities
        """
        pass
