"""
Category domain entity.

Categories form a hierarchy: each category has at most one parent and
owns a set of children. Products are associated through
ProductCategory links.
"""

import uuid
from datetime import datetime
from typing import List, Optional, Set, Tuple

from categories.domain.product_category import ProductCategory
from core.domain.events import utc_now
from core.domain.exceptions import InvalidArgumentError, InvalidStateError
from core.domain.guards import ensure_not_empty, ensure_not_none


class Category:
    """
    Category aggregate root.

    ``set_parent_category`` and ``add_children`` each update one side of
    the parent/child relationship only. Use
    ``categories.domain.services.attach_child`` to link both sides.
    """

    def __init__(
        self,
        id: uuid.UUID,
        code: str,
        name: str,
        url: str,
        description: Optional[str] = None,
        is_visible: bool = False,
        visible_from: Optional[datetime] = None,
        visible_to: Optional[datetime] = None,
        deleted: bool = False,
        parent: Optional["Category"] = None,
    ):
        self._id = id
        self._code = code
        self._name = name
        self._url = url
        self._description = description
        self._is_visible = is_visible
        self._visible_from = visible_from
        self._visible_to = visible_to
        self._deleted = deleted
        self._parent = parent
        self._children: List["Category"] = []
        self._product_links: Set[ProductCategory] = set()

    @classmethod
    def create(
        cls,
        code: str,
        name: str,
        url: str,
        category_id: Optional[uuid.UUID] = None,
    ) -> "Category":
        """
        Create a new Category entity.

        Args:
            code: Category unique code
            name: Category name
            url: Category url (unique slug)
            category_id: Optional UUID (generated if not provided)

        Returns:
            Category entity instance, not visible and not deleted

        Raises:
            InvalidArgumentError: If code, name or url is empty
        """
        ensure_not_empty(code, "code")
        ensure_not_empty(name, "name")
        ensure_not_empty(url, "url")
        return cls(id=category_id or uuid.uuid4(), code=code, name=name, url=url)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def code(self) -> str:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    @property
    def url(self) -> str:
        return self._url

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def is_visible(self) -> bool:
        return self._is_visible

    @property
    def visible_from(self) -> Optional[datetime]:
        return self._visible_from

    @property
    def visible_to(self) -> Optional[datetime]:
        return self._visible_to

    @property
    def deleted(self) -> bool:
        return self._deleted

    @property
    def parent(self) -> Optional["Category"]:
        return self._parent

    @property
    def children(self) -> Tuple["Category", ...]:
        """Child categories, in insertion order (read-only view)."""
        return tuple(self._children)

    @property
    def product_links(self) -> Tuple[ProductCategory, ...]:
        return tuple(self._product_links)

    @property
    def product_ids(self) -> Tuple[uuid.UUID, ...]:
        """Ids of the products associated to the category."""
        return tuple(link.product_id for link in self._product_links)

    def set_as_visible(
        self,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> None:
        """
        Make the category visible.

        Without arguments the category is visible from now on. With
        ``from_date`` only, ``visible_to`` is left as it is. With both
        dates the window is bounded.

        Args:
            from_date: Moment from which the category is visible
            to_date: Moment until which the category is visible

        Raises:
            InvalidArgumentError: If from_date is not before to_date, or
                not before the stored visible_to when to_date is omitted
        """
        if from_date is None:
            from_date = utc_now()
        end = to_date if to_date is not None else self._visible_to
        if end is not None and from_date >= end:
            raise InvalidArgumentError(
                "The from date should be previous to the end date", argument="from_date"
            )

        self._is_visible = True
        self._visible_from = from_date
        if to_date is not None:
            self._visible_to = to_date

    def is_visible_at(self, moment: Optional[datetime] = None) -> bool:
        """
        Check whether the category is visible at a given moment.

        Args:
            moment: Moment to check (defaults to now)

        Returns:
            True if visible and the moment falls within the window
        """
        if not self._is_visible or self._deleted:
            return False
        moment = moment or utc_now()
        if self._visible_from and moment < self._visible_from:
            return False
        if self._visible_to and moment > self._visible_to:
            return False
        return True

    def add_children(self, child: "Category") -> None:
        """
        Add a child category.

        Raises:
            InvalidArgumentError: If child is None
            InvalidStateError: If the child is already in the child set
        """
        ensure_not_none(child, "child")
        if child in self._children:
            raise InvalidStateError(f"The category already contains the child {child.code}")
        self._children.append(child)

    def change_name(self, name: str) -> None:
        """Change the category name."""
        self._name = ensure_not_empty(name, "name")

    def change_code(self, code: str) -> None:
        """Change the category code."""
        self._code = ensure_not_empty(code, "code")

    def change_description(self, description: str) -> None:
        """Change the category description."""
        self._description = ensure_not_empty(description, "description")

    def change_url(self, url: str) -> None:
        """Change the category url."""
        self._url = ensure_not_empty(url, "url")

    def set_parent_category(self, parent: "Category") -> None:
        """
        Set the parent category.

        The parent's child set is not updated.

        Raises:
            InvalidArgumentError: If parent is None
        """
        self._parent = ensure_not_none(parent, "parent")

    def add_product(self, product_id: uuid.UUID) -> None:
        """
        Associate a product to the category.

        Raises:
            InvalidArgumentError: If product_id is None
            InvalidStateError: If the product is already associated
        """
        ensure_not_none(product_id, "product_id")
        link = ProductCategory(category_id=self._id, product_id=product_id)
        if link in self._product_links:
            raise InvalidStateError(f"Product {product_id} is already in category {self._code}")
        self._product_links.add(link)

    def remove_product(self, product_id: uuid.UUID) -> None:
        """
        Remove a product association.

        Raises:
            InvalidStateError: If the product is not associated
        """
        link = ProductCategory(category_id=self._id, product_id=product_id)
        if link not in self._product_links:
            raise InvalidStateError(f"Product {product_id} is not in category {self._code}")
        self._product_links.remove(link)

    def delete(self) -> None:
        """
        Mark the category as deleted.

        Raises:
            InvalidStateError: If the category is already deleted
        """
        if self._deleted:
            raise InvalidStateError("The category is already deleted")
        self._deleted = True

    def restore(self) -> None:
        """
        Restore a deleted category.

        Raises:
            InvalidStateError: If the category is not deleted
        """
        if not self._deleted:
            raise InvalidStateError("The category is not deleted")
        self._deleted = False

    def __eq__(self, other):
        if not isinstance(other, Category):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"Category(id={self._id!s}, code={self._code!r}, name={self._name!r})"
