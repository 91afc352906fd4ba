"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from typing import Optional

from core.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Image(ValueObject):
    """Image reference (brand logos, category pictures)."""

    url: str
    alt_text: Optional[str] = None
    mime_type: Optional[str] = None

    def __post_init__(self):
        """Validate image reference."""
        if not self.url:
            raise InvalidArgumentError("Image url cannot be empty", argument="url")

    def __str__(self) -> str:
        """Return image url as string."""
        return self.url


@dataclass(frozen=True)
class SeoData(ValueObject):
    """Search engine metadata block attached to catalog pages."""

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None

    def is_empty(self) -> bool:
        """Return True when no SEO field is filled in."""
        return not (self.title or self.description or self.keywords)
