"""
Django implementation of CategoryRepository port.

This adapter converts between domain entities and Django ORM models.
Only parent pointers are stored, so categories are loaded as a whole
tree and linked in memory.
"""

import logging
import uuid
from typing import Dict, List, Optional, Set

from asgiref.sync import sync_to_async
from django.db import transaction

from categories.domain.category import Category
from categories.infrastructure.models import Category as CategoryModel
from categories.infrastructure.models import ProductCategory as ProductCategoryModel
from categories.ports.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class DjangoCategoryRepository(CategoryRepository):
    """
    Django ORM implementation of CategoryRepository.

    This adapter:
    1. Rebuilds the category tree from parent pointers
    2. Persists a category, its product links and its subtree
    3. Implements repository interface
    """

    def _to_domain(self, model: CategoryModel) -> Category:
        """
        Convert Django model to an unlinked domain entity.

        Args:
            model: Django Category model

        Returns:
            Category domain entity without parent or children
        """
        return Category(
            id=model.id,
            code=model.code,
            name=model.name,
            url=model.url,
            description=model.description,
            is_visible=model.is_visible,
            visible_from=model.visible_from,
            visible_to=model.visible_to,
            deleted=model.deleted,
        )

    def _load_tree(self) -> Dict[uuid.UUID, Category]:
        """
        Load every category and link parents, children and product links.

        Returns:
            Categories keyed by id
        """
        # pylint: disable=no-member
        models = list(CategoryModel.objects.all())
        categories = {model.id: self._to_domain(model) for model in models}

        for model in models:
            if model.parent_id is None:
                continue
            parent = categories.get(model.parent_id)
            child = categories[model.id]
            child.set_parent_category(parent)
            parent.add_children(child)

        for link in ProductCategoryModel.objects.all():
            categories[link.category_id].add_product(link.product_id)

        return categories

    def _save_one(self, category: Category) -> None:
        """
        Persist a single category row and sync its product links.

        Args:
            category: Category domain entity
        """
        # pylint: disable=no-member
        CategoryModel.objects.update_or_create(
            id=category.id,
            defaults={
                "code": category.code,
                "name": category.name,
                "url": category.url,
                "description": category.description,
                "is_visible": category.is_visible,
                "visible_from": category.visible_from,
                "visible_to": category.visible_to,
                "deleted": category.deleted,
                "parent_id": category.parent.id if category.parent else None,
            },
        )

        product_ids = set(category.product_ids)
        stored = set(
            ProductCategoryModel.objects.filter(category_id=category.id).values_list(
                "product_id", flat=True
            )
        )
        ProductCategoryModel.objects.filter(
            category_id=category.id, product_id__in=stored - product_ids
        ).delete()
        ProductCategoryModel.objects.bulk_create(
            [
                ProductCategoryModel(category_id=category.id, product_id=product_id)
                for product_id in product_ids - stored
            ]
        )

    @sync_to_async
    def save(self, category: Category) -> Category:
        """
        Save a category and the subtree below it.

        Each saved row stores its own parent pointer; use
        ``categories.domain.services.attach_child`` so that the child set
        and the parent pointers agree.

        Args:
            category: Category entity to save

        Returns:
            Saved category entity, reloaded from the tree
        """
        with transaction.atomic():
            pending = [category]
            seen: Set[uuid.UUID] = set()
            while pending:
                current = pending.pop(0)
                if current.id in seen:
                    continue
                seen.add(current.id)
                self._save_one(current)
                for child in current.children:
                    if child.parent != current:
                        # The stored link follows the child's own parent pointer.
                        logger.warning(
                            "Category %s is in the children of %s but its parent is %s",
                            child.code,
                            current.code,
                            child.parent.code if child.parent else None,
                        )
                    pending.append(child)

        return self._load_tree()[category.id]

    @sync_to_async
    def find_by_id(self, category_id: uuid.UUID) -> Optional[Category]:
        """
        Find a category by ID.

        Args:
            category_id: Category UUID

        Returns:
            Category entity or None if not found
        """
        return self._load_tree().get(category_id)

    @sync_to_async
    def find_by_code(self, code: str) -> Optional[Category]:
        """
        Find a category by code.

        Args:
            code: Category unique code

        Returns:
            Category entity or None if not found
        """
        for category in self._load_tree().values():
            if category.code == code:
                return category
        return None

    @sync_to_async
    def find_by_url(self, url: str) -> Optional[Category]:
        """
        Find a category by url.

        Args:
            url: Category url (unique slug)

        Returns:
            Category entity or None if not found
        """
        for category in self._load_tree().values():
            if category.url == url:
                return category
        return None

    @sync_to_async
    def list_roots(self) -> List[Category]:
        """
        List categories without a parent.

        Returns:
            List of root Category entities
        """
        return [category for category in self._load_tree().values() if category.parent is None]
