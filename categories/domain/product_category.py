"""
Category/Product association.

The many-to-many link between categories and products is kept as an
explicit set of (category id, product id) pairs owned by the category.
"""
import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ProductCategory:
    """One category/product link."""

    category_id: uuid.UUID
    product_id: uuid.UUID
