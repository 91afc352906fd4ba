"""
Product domain entity.

This is the core domain entity representing a catalog product.
It contains business logic and is independent of infrastructure.
"""
import uuid
from typing import TYPE_CHECKING, List, Optional

from core.domain.events import DomainEvent
from core.domain.exceptions import InvalidStateError
from core.domain.guards import ensure_not_empty, ensure_not_none
from products.domain.events import ProductEanCodeChanged

if TYPE_CHECKING:
    from brands.domain.brand import Brand
    from categories.domain.category import Category


class Product:
    """
    Product aggregate root.

    Operations that other modules care about record a domain event;
    ``collect_events`` hands them over to whoever publishes them.
    """

    def __init__(
        self,
        id: uuid.UUID,
        ean_code: str,
        sku: str,
        name: str,
        url: str,
        description: Optional[str] = None,
        vendor: Optional["Brand"] = None,
        deleted: bool = False,
    ):
        self._id = id
        self._ean_code = ean_code
        self._sku = sku
        self._name = name
        self._url = url
        self._description = description
        self._vendor = vendor
        self._deleted = deleted
        self._events: List[DomainEvent] = []

    @classmethod
    def create(
        cls,
        ean_code: str,
        sku: str,
        name: str,
        url: str,
        product_id: Optional[uuid.UUID] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            ean_code: European article number
            sku: Stock keeping unit
            name: Product display name
            url: Product url (unique slug)
            product_id: Optional UUID (generated if not provided)

        Returns:
            Product entity instance

        Raises:
            InvalidArgumentError: If any argument is empty
        """
        ensure_not_empty(ean_code, "ean_code")
        ensure_not_empty(sku, "sku")
        ensure_not_empty(name, "name")
        ensure_not_empty(url, "url")
        return cls(
            id=product_id or uuid.uuid4(),
            ean_code=ean_code,
            sku=sku,
            name=name,
            url=url,
        )

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def ean_code(self) -> str:
        return self._ean_code

    @property
    def sku(self) -> str:
        return self._sku

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
    def vendor(self) -> Optional["Brand"]:
        return self._vendor

    @property
    def deleted(self) -> bool:
        return self._deleted

    def change_ean_code(self, ean_code: str) -> None:
        """Change the EAN code and record ProductEanCodeChanged."""
        self._ean_code = ensure_not_empty(ean_code, "ean_code")
        self._events.append(ProductEanCodeChanged(self._id, ean_code))

    def change_sku(self, sku: str) -> None:
        self._sku = ensure_not_empty(sku, "sku")

    def change_name(self, name: str) -> None:
        self._name = ensure_not_empty(name, "name")

    def change_url(self, url: str) -> None:
        self._url = ensure_not_empty(url, "url")

    def change_description(self, description: str) -> None:
        self._description = ensure_not_empty(description, "description")

    def set_vendor(self, brand: "Brand") -> None:
        """
        Set the product vendor.

        The product is moved from its previous brand's product view to
        the new brand's.
        """
        ensure_not_none(brand, "brand")
        if self._vendor is not None:
            self._vendor._unregister_product(self)
        self._vendor = brand
        brand._register_product(self)

    def add_category(self, category: "Category") -> None:
        """Link the product to a category."""
        ensure_not_none(category, "category")
        category.add_product(self._id)

    def delete(self) -> None:
        """
        Mark the product as deleted.

        Raises:
            InvalidStateError: If the product is already deleted
        """
        if self._deleted:
            raise InvalidStateError("The product is already deleted")
        self._deleted = True

    def restore(self) -> None:
        """
        Restore a deleted product.

        Raises:
            InvalidStateError: If the product is not deleted
        """
        if not self._deleted:
            raise InvalidStateError("The product is not deleted")
        self._deleted = False

    def collect_events(self) -> List[DomainEvent]:
        """Return the recorded events and clear the buffer."""
        events, self._events = self._events, []
        return events

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"Product(id={self._id!s}, sku={self._sku!r}, name={self._name!r})"
