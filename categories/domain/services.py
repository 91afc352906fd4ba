"""
Category domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity: keeping both sides of a parent/child link
consistent and projecting category/product links onto products.
"""
import logging
from typing import TYPE_CHECKING, Iterable, List

from categories.domain.category import Category
from core.domain.exceptions import InvalidStateError
from core.domain.guards import ensure_not_none

if TYPE_CHECKING:
    from products.domain.product import Product

logger = logging.getLogger(__name__)


def ancestors_of(category: Category) -> List[Category]:
    """
    Return the parent chain of a category, nearest first.

    Args:
        category: Category to start from

    Returns:
        List of ancestors (empty for a root category)

    Raises:
        InvalidStateError: If the parent chain loops back on itself
    """
    ancestors: List[Category] = []
    seen = {category.id}
    current = category.parent
    while current is not None:
        if current.id in seen:
            raise InvalidStateError(f"Category hierarchy contains a cycle at {current.code}")
        seen.add(current.id)
        ancestors.append(current)
        current = current.parent
    return ancestors


def attach_child(parent: Category, child: Category) -> None:
    """
    Link a child under a parent, updating both sides.

    All checks run before either category is modified.

    Args:
        parent: Category that receives the child
        child: Category to attach

    Raises:
        InvalidArgumentError: If either category is None
        InvalidStateError: If the link would make a category its own
            ancestor, the child already has another parent, or the parent
            already contains the child
    """
    ensure_not_none(parent, "parent")
    ensure_not_none(child, "child")

    if parent == child:
        raise InvalidStateError("A category cannot be its own parent")
    if child in ancestors_of(parent):
        raise InvalidStateError(
            f"Attaching {child.code} under {parent.code} would create a cycle"
        )
    if child.parent is not None and child.parent != parent:
        raise InvalidStateError(
            f"Category {child.code} already belongs to {child.parent.code}"
        )

    parent.add_children(child)
    child.set_parent_category(parent)
    logger.debug("Attached category %s under %s", child.code, parent.code)


def products_of(category: Category, products: Iterable["Product"]) -> List["Product"]:
    """
    Project the category's product links onto product instances.

    Args:
        category: Category whose links are projected
        products: Candidate products (e.g. loaded by a repository)

    Returns:
        Products linked to the category, in the order given
    """
    linked = set(category.product_ids)
    return [product for product in products if product.id in linked]
