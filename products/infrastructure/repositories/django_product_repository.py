"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import TYPE_CHECKING, List, Optional

from asgiref.sync import sync_to_async

from products.domain.product import Product
from products.infrastructure.models import Product as ProductModel
from products.ports.product_repository import ProductRepository

if TYPE_CHECKING:
    from brands.domain.brand import Brand


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    Category links are owned by categories and persisted by the
    category repository, not here.
    """

    def to_domain(self, model: ProductModel, vendor: Optional["Brand"] = None) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model
            vendor: Already loaded vendor brand, if the caller has one

        Returns:
            Product domain entity
        """
        product = Product(
            id=model.id,
            ean_code=model.ean_code,
            sku=model.sku,
            name=model.name,
            url=model.url,
            description=model.description,
            deleted=model.deleted,
        )
        if vendor is None and model.vendor_id:
            from brands.infrastructure.repositories.django_brand_repository import (
                DjangoBrandRepository,
            )

            vendor = DjangoBrandRepository().to_domain(model.vendor, with_products=False)
        if vendor is not None:
            product.set_vendor(vendor)
        return product

    def _to_fields(self, product: Product) -> dict:
        """
        Convert domain entity to Django model field values.

        Args:
            product: Product domain entity

        Returns:
            Field values for the Django Product model
        """
        return {
            "vendor_id": product.vendor.id if product.vendor else None,
            "ean_code": product.ean_code,
            "sku": product.sku,
            "name": product.name,
            "url": product.url,
            "description": product.description,
            "deleted": product.deleted,
        }

    @sync_to_async
    def save(self, product: Product) -> Product:
        """
        Save a product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        model, _ = ProductModel.objects.update_or_create(
            id=product.id,
            defaults=self._to_fields(product),
        )
        return self.to_domain(model)

    @sync_to_async
    def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        try:
            model = ProductModel.objects.select_related("vendor").get(id=product_id)
            return self.to_domain(model)
        except ProductModel.DoesNotExist:
            return None

    @sync_to_async
    def find_by_sku(self, sku: str) -> Optional[Product]:
        """
        Find a product by SKU.

        Args:
            sku: Stock keeping unit

        Returns:
            Product entity or None if not found
        """
        try:
            model = ProductModel.objects.select_related("vendor").get(sku=sku)
            return self.to_domain(model)
        except ProductModel.DoesNotExist:
            return None

    @sync_to_async
    def list_by_vendor(self, brand_id: uuid.UUID) -> List[Product]:
        """
        List all products of a brand.

        Args:
            brand_id: Brand UUID

        Returns:
            List of Product entities
        """
        models = ProductModel.objects.select_related("vendor").filter(vendor_id=brand_id)
        return [self.to_domain(model) for model in models]

    @sync_to_async
    def list_by_ids(self, product_ids: List[uuid.UUID]) -> List[Product]:
        """
        List products by IDs.

        Args:
            product_ids: Product UUIDs

        Returns:
            List of Product entities found
        """
        models = ProductModel.objects.select_related("vendor").filter(id__in=product_ids)
        return [self.to_domain(model) for model in models]
