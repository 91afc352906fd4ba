"""
Pytest configuration and shared fixtures.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from brands.domain.brand import Brand
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from categories.domain.category import Category
from categories.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from core.infrastructure.event_handlers import InMemoryEventLog
from core.infrastructure.events import InMemoryEventBus
from products.domain.custom_attribute import CustomAttribute
from products.domain.product import Product
from products.infrastructure.repositories.django_custom_attribute_repository import (
    DjangoCustomAttributeRepository,
)
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)


@pytest.fixture
def brand_repository():
    """Fixture for BrandRepository."""
    return DjangoBrandRepository()


@pytest.fixture
def category_repository():
    """Fixture for CategoryRepository."""
    return DjangoCategoryRepository()


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def custom_attribute_repository():
    """Fixture for CustomAttributeRepository."""
    return DjangoCustomAttributeRepository()


@pytest.fixture
def event_bus():
    """Fixture for a fresh, isolated event bus."""
    return InMemoryEventBus()


@pytest.fixture
def event_log(event_bus):
    """Fixture for an event log subscribed to every event on event_bus."""
    from core.domain.events import DomainEvent

    log = InMemoryEventLog()
    event_bus.subscribe(DomainEvent, log)
    return log


@pytest.fixture
def sample_brand():
    """Fixture for a sample Brand entity."""
    unique_id = uuid.uuid4().hex[:8]
    return Brand.create(name=f"Acme{unique_id}", url=f"acme-{unique_id}")


@pytest.fixture
def sample_category():
    """Fixture for a sample Category entity."""
    return Category.create("C1", "Shoes", "/shoes")


@pytest.fixture
def sample_product():
    """Fixture for a sample Product entity."""
    unique_id = uuid.uuid4().hex[:8]
    return Product.create(
        ean_code="4006381333931",
        sku=f"SKU-{unique_id}",
        name="Trail Runner",
        url=f"trail-runner-{unique_id}",
    )


@pytest.fixture
def sample_attribute():
    """Fixture for a sample CustomAttribute entity."""
    return CustomAttribute.create(name="Weight", data_type="number")


@pytest.fixture
def visibility_window():
    """Fixture for a (from, to) pair one week apart."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return start, start + timedelta(days=7)
