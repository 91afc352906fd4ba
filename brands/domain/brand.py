"""
Brand domain entity.

This is the core domain entity representing a catalog brand.
It contains business logic and is independent of infrastructure.
"""

import uuid
from typing import TYPE_CHECKING, Optional, Set, Tuple

from core.domain.exceptions import InvalidArgumentError, InvalidStateError
from core.domain.guards import ensure_not_empty, ensure_not_none
from core.domain.value_objects import Image, SeoData

if TYPE_CHECKING:
    from products.domain.product import Product


class Brand:
    """
    Brand aggregate root.

    State is only changed through the named operations below; every
    operation validates its input before touching any field. Brands are
    never removed, only soft-deleted and restored.
    """

    def __init__(
        self,
        id: uuid.UUID,
        name: str,
        url: str,
        description: Optional[str] = None,
        deleted: bool = False,
        logo: Optional[Image] = None,
        seo: Optional[SeoData] = None,
    ):
        self._id = id
        self._name = name
        self._url = url
        self._description = description
        self._deleted = deleted
        self._logo = logo
        self._seo = seo
        self._products: Set["Product"] = set()

    @classmethod
    def create(cls, name: str, url: str, brand_id: Optional[uuid.UUID] = None) -> "Brand":
        """
        Create a new Brand entity.

        Args:
            name: Brand display name
            url: Brand url (unique slug)
            brand_id: Optional UUID (generated if not provided)

        Returns:
            Brand entity instance

        Raises:
            InvalidArgumentError: If name or url is empty
        """
        ensure_not_empty(name, "name")
        ensure_not_empty(url, "url")
        return cls(id=brand_id or uuid.uuid4(), name=name, url=url)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def url(self) -> str:
        return self._url

    @property
    def deleted(self) -> bool:
        return self._deleted

    @property
    def logo(self) -> Optional[Image]:
        return self._logo

    @property
    def seo(self) -> Optional[SeoData]:
        return self._seo

    @property
    def products(self) -> Tuple["Product", ...]:
        """Products associated to the brand (read-only view)."""
        return tuple(self._products)

    def change_name(self, name: str) -> None:
        """Change the brand name."""
        self._name = ensure_not_empty(name, "name")

    def change_description(self, description: str) -> None:
        """Change the brand description."""
        self._description = ensure_not_empty(description, "description")

    def change_url(self, url: str) -> None:
        """Change the brand url."""
        self._url = ensure_not_empty(url, "url")

    def set_logo(self, logo: Image) -> None:
        """Set the brand logo."""
        self._logo = ensure_not_none(logo, "logo")

    def set_seo_data(self, seo: SeoData) -> None:
        """
        Set the brand SEO metadata.

        Raises:
            InvalidArgumentError: If seo is None or has no field filled in
        """
        ensure_not_none(seo, "seo")
        if seo.is_empty():
            raise InvalidArgumentError("seo cannot be empty", argument="seo")
        self._seo = seo

    def delete(self) -> None:
        """
        Mark the brand as deleted.

        Raises:
            InvalidStateError: If the brand is already deleted
        """
        if self._deleted:
            raise InvalidStateError("The brand is already deleted")
        self._deleted = True

    def restore(self) -> None:
        """
        Restore a deleted brand.

        Raises:
            InvalidStateError: If the brand is not deleted
        """
        if not self._deleted:
            raise InvalidStateError("The brand is not deleted")
        self._deleted = False

    def _register_product(self, product: "Product") -> None:
        # Called from Product.set_vendor; membership is owned by the product side.
        self._products.add(product)

    def _unregister_product(self, product: "Product") -> None:
        self._products.discard(product)

    def __eq__(self, other):
        if not isinstance(other, Brand):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"Brand(id={self._id!s}, name={self._name!r}, url={self._url!r})"
