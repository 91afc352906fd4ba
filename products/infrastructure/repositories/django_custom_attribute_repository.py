"""
Django implementation of CustomAttributeRepository port.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from products.domain.custom_attribute import CustomAttribute
from products.infrastructure.models import CustomAttribute as CustomAttributeModel
from products.ports.custom_attribute_repository import CustomAttributeRepository


class DjangoCustomAttributeRepository(CustomAttributeRepository):
    """
    Django ORM implementation of CustomAttributeRepository.

    Recorded events are not persisted; publish them before saving.
    """

    def to_domain(self, model: CustomAttributeModel) -> CustomAttribute:
        """Convert Django model to domain entity."""
        return CustomAttribute(
            id=model.id,
            name=model.name,
            data_type=model.data_type,
            unit_of_measure=model.unit_of_measure,
            deleted=model.deleted,
        )

    @sync_to_async
    def save(self, attribute: CustomAttribute) -> CustomAttribute:
        """
        Save a custom attribute entity.

        Args:
            attribute: CustomAttribute entity to save

        Returns:
            Saved custom attribute entity
        """
        # pylint: disable=no-member
        model, _ = CustomAttributeModel.objects.update_or_create(
            id=attribute.id,
            defaults={
                "name": attribute.name,
                "data_type": attribute.data_type,
                "unit_of_measure": attribute.unit_of_measure,
                "deleted": attribute.deleted,
            },
        )
        return self.to_domain(model)

    @sync_to_async
    def find_by_id(self, attribute_id: uuid.UUID) -> Optional[CustomAttribute]:
        """
        Find a custom attribute by ID.

        Args:
            attribute_id: CustomAttribute UUID

        Returns:
            CustomAttribute entity or None if not found
        """
        try:
            # pylint: disable=no-member
            return self.to_domain(CustomAttributeModel.objects.get(id=attribute_id))
        except CustomAttributeModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def list_all(self, include_deleted: bool = False) -> List[CustomAttribute]:
        """
        List custom attributes.

        Args:
            include_deleted: Whether soft-deleted attributes are returned

        Returns:
            List of CustomAttribute entities
        """
        # pylint: disable=no-member
        qs = CustomAttributeModel.objects.all()
        if not include_deleted:
            qs = qs.filter(deleted=False)
        return [self.to_domain(model) for model in qs]
