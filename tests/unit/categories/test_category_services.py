"""
Unit tests for category domain services.
"""

import pytest

from categories.domain.category import Category
from categories.domain.services import ancestors_of, attach_child, products_of
from core.domain.exceptions import InvalidArgumentError, InvalidStateError
from products.domain.product import Product


def make_category(code: str) -> Category:
    return Category.create(code, f"Category {code}", f"/{code.lower()}")


class TestAttachChild:
    """Tests for synchronized parent/child linking."""

    def test_links_both_sides(self):
        """Test parent and child agree after attaching."""
        parent = make_category("ROOT")
        child = make_category("SHOES")

        attach_child(parent, child)

        assert parent.children == (child,)
        assert child.parent is parent

    def test_rejects_none(self):
        """Test missing categories are rejected."""
        with pytest.raises(InvalidArgumentError):
            attach_child(None, make_category("A"))
        with pytest.raises(InvalidArgumentError):
            attach_child(make_category("A"), None)

    def test_rejects_self(self):
        """Test a category cannot be its own parent."""
        category = make_category("A")

        with pytest.raises(InvalidStateError, match="its own parent"):
            attach_child(category, category)
        assert category.children == ()
        assert category.parent is None

    def test_rejects_cycle(self):
        """Test an ancestor cannot be attached below a descendant."""
        root = make_category("ROOT")
        middle = make_category("MIDDLE")
        leaf = make_category("LEAF")
        attach_child(root, middle)
        attach_child(middle, leaf)

        with pytest.raises(InvalidStateError, match="cycle"):
            attach_child(leaf, root)

        assert leaf.children == ()
        assert root.parent is None

    def test_rejects_second_parent(self):
        """Test a child already under another parent is rejected."""
        first = make_category("FIRST")
        second = make_category("SECOND")
        child = make_category("CHILD")
        attach_child(first, child)

        with pytest.raises(InvalidStateError, match="already belongs"):
            attach_child(second, child)

        assert second.children == ()
        assert child.parent is first

    def test_rejects_duplicate(self):
        """Test attaching twice fails like add_children."""
        parent = make_category("ROOT")
        child = make_category("CHILD")
        attach_child(parent, child)

        with pytest.raises(InvalidStateError, match="already contains"):
            attach_child(parent, child)
        assert len(parent.children) == 1


class TestAncestorsOf:
    """Tests for walking the parent chain."""

    def test_root_has_no_ancestors(self):
        assert ancestors_of(make_category("ROOT")) == []

    def test_nearest_first(self):
        root = make_category("ROOT")
        middle = make_category("MIDDLE")
        leaf = make_category("LEAF")
        attach_child(root, middle)
        attach_child(middle, leaf)

        assert ancestors_of(leaf) == [middle, root]

    def test_detects_cycle_built_with_entity_methods(self):
        """Test a loop made through set_parent_category is reported."""
        first = make_category("FIRST")
        second = make_category("SECOND")
        first.set_parent_category(second)
        second.set_parent_category(first)

        with pytest.raises(InvalidStateError, match="cycle"):
            ancestors_of(first)


class TestProductsOf:
    """Tests for projecting product links onto products."""

    def test_projects_linked_products_in_order(self, sample_category):
        products = [
            Product.create(f"400000000000{i}", f"SKU-{i}", f"Product {i}", f"product-{i}")
            for i in range(4)
        ]
        products[3].add_category(sample_category)
        products[1].add_category(sample_category)

        assert products_of(sample_category, products) == [products[1], products[3]]

    def test_empty(self, sample_category):
        assert products_of(sample_category, []) == []
