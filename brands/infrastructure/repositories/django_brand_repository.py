"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository
from core.domain.value_objects import Image, SeoData


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def to_domain(self, model: BrandModel, with_products: bool = True) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model
            with_products: Whether to load the brand's products view

        Returns:
            Brand domain entity
        """
        logo = None
        if model.logo_url:
            logo = Image(
                url=model.logo_url,
                alt_text=model.logo_alt_text,
                mime_type=model.logo_mime_type,
            )
        seo = None
        if model.seo_title or model.seo_description or model.seo_keywords:
            seo = SeoData(
                title=model.seo_title,
                description=model.seo_description,
                keywords=model.seo_keywords,
            )

        brand = Brand(
            id=model.id,
            name=model.name,
            url=model.url,
            description=model.description,
            deleted=model.deleted,
            logo=logo,
            seo=seo,
        )

        if with_products:
            from products.infrastructure.repositories.django_product_repository import (
                DjangoProductRepository,
            )

            product_repository = DjangoProductRepository()
            for product_model in model.products.all():
                product_repository.to_domain(product_model, vendor=brand)
        return brand

    def _to_fields(self, brand: Brand) -> dict:
        """
        Convert domain entity to Django model field values.

        Args:
            brand: Brand domain entity

        Returns:
            Field values for the Django Brand model
        """
        logo = brand.logo
        seo = brand.seo
        return {
            "name": brand.name,
            "description": brand.description,
            "url": brand.url,
            "deleted": brand.deleted,
            "logo_url": logo.url if logo else None,
            "logo_alt_text": logo.alt_text if logo else None,
            "logo_mime_type": logo.mime_type if logo else None,
            "seo_title": seo.title if seo else None,
            "seo_description": seo.description if seo else None,
            "seo_keywords": seo.keywords if seo else None,
        }

    @sync_to_async
    def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        # pylint: disable=no-member
        model, _ = BrandModel.objects.update_or_create(
            id=brand.id,
            defaults=self._to_fields(brand),
        )
        return self.to_domain(model)

    @sync_to_async
    def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            return self.to_domain(BrandModel.objects.get(id=brand_id))
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def find_by_url(self, url: str) -> Optional[Brand]:
        """
        Find a brand by url.

        Args:
            url: Brand url (unique slug)

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            return self.to_domain(BrandModel.objects.get(url=url))
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def exists(self, brand_id: uuid.UUID) -> bool:
        """
        Check if a brand exists.

        Args:
            brand_id: Brand UUID

        Returns:
            True if brand exists, False otherwise
        """
        # pylint: disable=no-member
        return BrandModel.objects.filter(id=brand_id).exists()

    @sync_to_async
    def list_all(self, include_deleted: bool = False) -> List[Brand]:
        """
        List brands.

        Args:
            include_deleted: Whether soft-deleted brands are returned

        Returns:
            List of Brand entities
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.prefetch_related("products")
        if not include_deleted:
            qs = qs.filter(deleted=False)
        return [self.to_domain(model) for model in qs]
