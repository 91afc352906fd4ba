"""
Tier price read-model helpers.

Query shaping only: the filtering itself is left to whatever backs the
collection (the database for a QuerySet, Python for anything else).
"""
import uuid
from typing import Iterable, List, TypeVar, Union

from django.db.models import QuerySet

T = TypeVar("T")


def by_product(
    tier_prices: Union[QuerySet, Iterable[T]], product_id: uuid.UUID
) -> Union[QuerySet, List[T]]:
    """
    Restrict tier prices to those of one product.

    Args:
        tier_prices: QuerySet or iterable of records exposing ``product_id``
        product_id: Product UUID to keep

    Returns:
        A lazily filtered QuerySet when given one, otherwise a list
        preserving the input order
    """
    if isinstance(tier_prices, QuerySet):
        return tier_prices.filter(product_id=product_id)
    return [tier_price for tier_price in tier_prices if tier_price.product_id == product_id]
