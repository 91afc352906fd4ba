"""
Integration tests for repository implementations.
"""

import uuid
from datetime import timedelta

import pytest

from brands.domain.brand import Brand
from categories.domain.category import Category
from categories.domain.services import attach_child, products_of
from core.domain.exceptions import InvalidArgumentError
from core.domain.value_objects import Image, SeoData


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestBrandRepository:
    """Integration tests for BrandRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, brand_repository):
        """Test saving and finding a brand."""
        brand = Brand.create(name="Acme", url="acme")
        brand.change_description("Outdoor gear")
        brand.set_logo(Image("https://cdn.example.com/acme.png", alt_text="Acme"))
        brand.set_seo_data(SeoData(title="Acme", keywords="outdoor"))

        saved = await brand_repository.save(brand)
        assert saved.id == brand.id

        found = await brand_repository.find_by_id(brand.id)
        assert found is not None
        assert found.name == "Acme"
        assert found.url == "acme"
        assert found.description == "Outdoor gear"
        assert found.logo == Image("https://cdn.example.com/acme.png", alt_text="Acme")
        assert found.seo == SeoData(title="Acme", keywords="outdoor")
        assert found.deleted is False

    @pytest.mark.asyncio
    async def test_find_not_found(self, brand_repository):
        """Test finding non-existent brand."""
        assert await brand_repository.find_by_id(uuid.uuid4()) is None
        assert await brand_repository.find_by_url("missing") is None

    @pytest.mark.asyncio
    async def test_update_soft_delete(self, brand_repository):
        """Test a soft delete is persisted and hidden from listings."""
        brand = Brand.create(name="Acme", url="acme-deleted")
        await brand_repository.save(brand)

        brand.delete()
        await brand_repository.save(brand)

        found = await brand_repository.find_by_url("acme-deleted")
        assert found.deleted is True
        assert brand.id not in [b.id for b in await brand_repository.list_all()]
        assert brand.id in [b.id for b in await brand_repository.list_all(include_deleted=True)]

    @pytest.mark.asyncio
    async def test_exists(self, brand_repository):
        """Test checking brand existence."""
        brand = Brand.create(name="Acme", url="acme-exists")
        await brand_repository.save(brand)

        assert await brand_repository.exists(brand.id) is True
        assert await brand_repository.exists(uuid.uuid4()) is False

    @pytest.mark.asyncio
    async def test_products_view(self, brand_repository, product_repository, sample_product):
        """Test a loaded brand exposes the products sold under it."""
        brand = Brand.create(name="Acme", url="acme-products")
        await brand_repository.save(brand)
        sample_product.set_vendor(brand)
        await product_repository.save(sample_product)

        found = await brand_repository.find_by_id(brand.id)
        assert [p.id for p in found.products] == [sample_product.id]


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestProductRepository:
    """Integration tests for ProductRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, product_repository, sample_product):
        """Test saving and finding a product."""
        sample_product.change_ean_code("012345")
        await product_repository.save(sample_product)

        found = await product_repository.find_by_id(sample_product.id)
        assert found.ean_code == "012345"
        assert found.sku == sample_product.sku
        assert found.vendor is None
        assert found.collect_events() == []

        assert (await product_repository.find_by_sku(sample_product.sku)).id == sample_product.id
        assert await product_repository.find_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_list_by_vendor(self, brand_repository, product_repository, sample_product):
        """Test listing products of a brand."""
        brand = Brand.create(name="Acme", url="acme-vendor")
        await brand_repository.save(brand)
        sample_product.set_vendor(brand)
        await product_repository.save(sample_product)

        products = await product_repository.list_by_vendor(brand.id)
        assert [p.id for p in products] == [sample_product.id]
        assert products[0].vendor.id == brand.id
        assert await product_repository.list_by_vendor(uuid.uuid4()) == []


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestCustomAttributeRepository:
    """Integration tests for CustomAttributeRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, custom_attribute_repository, sample_attribute):
        """Test saving and finding a custom attribute."""
        sample_attribute.set_unit_of_measure("kg")
        await custom_attribute_repository.save(sample_attribute)

        found = await custom_attribute_repository.find_by_id(sample_attribute.id)
        assert found.name == "Weight"
        assert found.data_type == "number"
        assert found.unit_of_measure == "kg"
        assert found.deleted is False
        assert found.collect_events() == []
        assert await custom_attribute_repository.find_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_soft_delete(self, custom_attribute_repository, sample_attribute):
        """Test a soft-deleted attribute is hidden from listings."""
        await custom_attribute_repository.save(sample_attribute)
        sample_attribute.delete()
        await custom_attribute_repository.save(sample_attribute)

        assert await custom_attribute_repository.list_all() == []
        listed = await custom_attribute_repository.list_all(include_deleted=True)
        assert [a.id for a in listed] == [sample_attribute.id]
        assert listed[0].deleted is True


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestCategoryRepository:
    """Integration tests for CategoryRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, category_repository, visibility_window):
        """Test saving and finding a category."""
        start, end = visibility_window
        category = Category.create("C1", "Shoes", "/shoes")
        category.change_description("All shoes")
        category.set_as_visible(start, end)

        await category_repository.save(category)

        found = await category_repository.find_by_id(category.id)
        assert found.code == "C1"
        assert found.name == "Shoes"
        assert found.description == "All shoes"
        assert found.is_visible is True
        assert found.visible_from == start
        assert found.visible_to == end
        assert (await category_repository.find_by_code("C1")).id == category.id
        assert (await category_repository.find_by_url("/shoes")).id == category.id

    @pytest.mark.asyncio
    async def test_moved_start_keeps_stored_window(self, category_repository, visibility_window):
        """Test a rejected start date leaves the saved window valid."""
        start, end = visibility_window
        category = Category.create("C1", "Shoes", "/shoes")
        category.set_as_visible(start, end)

        with pytest.raises(InvalidArgumentError):
            category.set_as_visible(end + timedelta(days=1))
        await category_repository.save(category)

        found = await category_repository.find_by_id(category.id)
        assert found.visible_from == start
        assert found.visible_to == end

    @pytest.mark.asyncio
    async def test_find_not_found(self, category_repository):
        """Test finding non-existent category."""
        assert await category_repository.find_by_id(uuid.uuid4()) is None
        assert await category_repository.find_by_code("missing") is None

    @pytest.mark.asyncio
    async def test_tree_round_trip(self, category_repository):
        """Test a subtree saved from its root is reloaded linked."""
        root = Category.create("ROOT", "Catalog", "/")
        shoes = Category.create("SHOES", "Shoes", "/shoes")
        boots = Category.create("BOOTS", "Boots", "/shoes/boots")
        attach_child(root, shoes)
        attach_child(shoes, boots)

        await category_repository.save(root)

        found = await category_repository.find_by_code("BOOTS")
        assert found.parent.code == "SHOES"
        assert found.parent.parent.code == "ROOT"
        assert [c.code for c in found.parent.children] == ["BOOTS"]

        roots = await category_repository.list_roots()
        assert [c.code for c in roots] == ["ROOT"]

    @pytest.mark.asyncio
    async def test_product_links(
        self, category_repository, product_repository, sample_product
    ):
        """Test category/product links are synced on save."""
        await product_repository.save(sample_product)
        category = Category.create("C1", "Shoes", "/shoes")
        sample_product.add_category(category)
        await category_repository.save(category)

        found = await category_repository.find_by_id(category.id)
        assert found.product_ids == (sample_product.id,)
        products = await product_repository.list_by_ids(list(found.product_ids))
        assert products_of(found, products) == [sample_product]

        found.remove_product(sample_product.id)
        await category_repository.save(found)

        reloaded = await category_repository.find_by_id(category.id)
        assert reloaded.product_ids == ()
