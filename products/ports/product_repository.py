"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from products.domain.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """
        Save a product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_sku(self, sku: str) -> Optional[Product]:
        """
        Find a product by SKU.

        Args:
            sku: Stock keeping unit

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def list_by_vendor(self, brand_id: uuid.UUID) -> List[Product]:
        """
        List all products of a brand.

        Args:
            brand_id: Brand UUID

        Returns:
            List of Product entities
        """
        pass

    @abstractmethod
    async def list_by_ids(self, product_ids: List[uuid.UUID]) -> List[Product]:
        """
        List products by IDs.

        Args:
            product_ids: Product UUIDs

        Returns:
            List of Product entities found
        """
        pass
