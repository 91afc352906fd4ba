"""
Tier price domain entity.

A tier price is the unit price a product sells at when the ordered
quantity falls within a band.
"""
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class TierPrice:
    """
    Tier price record.

    This is an immutable value object with business logic.
    """

    id: uuid.UUID
    product_id: uuid.UUID
    from_quantity: int
    to_quantity: int
    price: Decimal

    def __post_init__(self):
        """Validate tier price."""
        if not self.product_id:
            raise InvalidArgumentError("Product ID is required", argument="product_id")
        if self.from_quantity < 1:
            raise InvalidArgumentError(
                "From quantity must be at least 1", argument="from_quantity"
            )
        if self.to_quantity <= self.from_quantity:
            raise InvalidArgumentError(
                "To quantity must be greater than from quantity", argument="to_quantity"
            )
        if self.price < 0:
            raise InvalidArgumentError("Price cannot be negative", argument="price")

    @classmethod
    def create(
        cls,
        product_id: uuid.UUID,
        from_quantity: int,
        to_quantity: int,
        price: Decimal,
        tier_price_id: Optional[uuid.UUID] = None,
    ) -> "TierPrice":
        """
        Create a new TierPrice.

        Args:
            product_id: Product UUID
            from_quantity: Lowest quantity of the band
            to_quantity: Highest quantity of the band
            price: Unit price within the band
            tier_price_id: Optional UUID (generated if not provided)

        Returns:
            TierPrice instance
        """
        return cls(
            id=tier_price_id or uuid.uuid4(),
            product_id=product_id,
            from_quantity=from_quantity,
            to_quantity=to_quantity,
            price=Decimal(str(price)),
        )

    def applies_to(self, quantity: int) -> bool:
        """Check whether an ordered quantity falls within the band."""
        return self.from_quantity <= quantity <= self.to_quantity
