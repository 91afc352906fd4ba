"""
Unit tests for Brand domain entity.
"""

import uuid

import pytest

from brands.domain.brand import Brand
from core.domain.exceptions import InvalidArgumentError, InvalidStateError
from core.domain.value_objects import Image, SeoData


class TestBrandEntity:
    """Tests for Brand domain entity."""

    @pytest.mark.parametrize("value", ["Acme", " ", "a", "ÄÖÜ brand"])
    def test_create_brand(self, value):
        """Test creating a brand keeps name and url as given."""
        brand = Brand.create(value, value)

        assert brand.name == value
        assert brand.url == value
        assert brand.deleted is False
        assert isinstance(brand.id, uuid.UUID)

    def test_create_brand_with_id(self):
        """Test creating a brand with specific ID."""
        brand_id = uuid.uuid4()
        brand = Brand.create(name="Acme", url="acme", brand_id=brand_id)

        assert brand.id == brand_id

    def test_create_generates_fresh_ids(self):
        """Test each created brand gets its own identifier."""
        assert Brand.create("Acme", "acme").id != Brand.create("Acme", "acme").id

    @pytest.mark.parametrize("value", ["", None])
    def test_create_invalid_name(self, value):
        """Test creating a brand with an empty name."""
        with pytest.raises(InvalidArgumentError, match="name cannot be empty"):
            Brand.create(value, "x")

    @pytest.mark.parametrize("value", ["", None])
    def test_create_invalid_url(self, value):
        """Test creating a brand with an empty url."""
        with pytest.raises(InvalidArgumentError, match="url cannot be empty"):
            Brand.create("x", value)

    def test_invalid_argument_is_value_error(self):
        """Test InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Brand.create("", "x")

    def test_change_name(self, sample_brand):
        """Test changing the brand name."""
        sample_brand.change_name("Acme Corp")
        assert sample_brand.name == "Acme Corp"

    def test_change_name_empty_keeps_previous(self, sample_brand):
        """Test a rejected name change leaves the name untouched."""
        sample_brand.change_name("Acme Corp")

        with pytest.raises(InvalidArgumentError):
            sample_brand.change_name("")
        assert sample_brand.name == "Acme Corp"

    def test_change_description(self, sample_brand):
        """Test changing the brand description."""
        assert sample_brand.description is None
        sample_brand.change_description("Outdoor gear since 1970")
        assert sample_brand.description == "Outdoor gear since 1970"

    def test_change_description_empty(self, sample_brand):
        """Test empty description is rejected."""
        with pytest.raises(InvalidArgumentError):
            sample_brand.change_description(None)

    def test_change_url(self, sample_brand):
        """Test changing the brand url."""
        sample_brand.change_url("acme-corp")
        assert sample_brand.url == "acme-corp"

    def test_change_url_empty(self, sample_brand):
        """Test empty url is rejected."""
        previous = sample_brand.url
        with pytest.raises(InvalidArgumentError):
            sample_brand.change_url("")
        assert sample_brand.url == previous

    def test_set_logo(self, sample_brand):
        """Test setting the brand logo."""
        logo = Image(url="https://cdn.example.com/acme.png", alt_text="Acme")
        sample_brand.set_logo(logo)
        assert sample_brand.logo == logo

    def test_set_logo_none(self, sample_brand):
        """Test a missing logo is rejected."""
        with pytest.raises(InvalidArgumentError, match="logo is required"):
            sample_brand.set_logo(None)

    def test_set_seo_data(self, sample_brand):
        """Test setting the brand SEO data."""
        seo = SeoData(title="Acme", description="Acme products")
        sample_brand.set_seo_data(seo)
        assert sample_brand.seo == seo

    def test_set_seo_data_none(self, sample_brand):
        """Test missing SEO data is rejected."""
        with pytest.raises(InvalidArgumentError, match="seo is required"):
            sample_brand.set_seo_data(None)

    def test_set_seo_data_empty(self, sample_brand):
        """Test an SEO block with no field filled in is rejected."""
        seo = SeoData(title="Acme")
        sample_brand.set_seo_data(seo)

        with pytest.raises(InvalidArgumentError, match="seo cannot be empty"):
            sample_brand.set_seo_data(SeoData())

        assert sample_brand.seo == seo

    def test_delete(self, sample_brand):
        """Test deleting a brand."""
        sample_brand.delete()
        assert sample_brand.deleted is True

    def test_delete_twice(self, sample_brand):
        """Test deleting an already deleted brand."""
        sample_brand.delete()
        with pytest.raises(InvalidStateError, match="already deleted"):
            sample_brand.delete()
        assert sample_brand.deleted is True

    def test_restore(self, sample_brand):
        """Test restoring a deleted brand."""
        sample_brand.delete()
        sample_brand.restore()
        assert sample_brand.deleted is False

    def test_restore_not_deleted(self, sample_brand):
        """Test restoring a brand that is not deleted."""
        with pytest.raises(InvalidStateError, match="not deleted"):
            sample_brand.restore()

    def test_products_view_is_read_only(self, sample_brand, sample_product):
        """Test products are exposed as an immutable snapshot."""
        sample_product.set_vendor(sample_brand)

        products = sample_brand.products
        assert products == (sample_product,)
        assert isinstance(products, tuple)

    def test_brands_equal_by_id(self):
        """Test brand identity is its id."""
        brand_id = uuid.uuid4()
        assert Brand(id=brand_id, name="A", url="a") == Brand(id=brand_id, name="B", url="b")
