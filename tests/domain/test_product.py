"""Unit tests for the Product entity and its category."""

from dataclasses import FrozenInstanceError

import pytest

from catalog.domain.exceptions import InvalidCategoryError
from catalog.domain.model.product import Product, ProductCategory


class TestProductCategory:

    def test_values_are_display_labels(self):
        assert ProductCategory.ELECTRONICS.value == "Electronics"
        assert ProductCategory.CLOTHING.value == "Clothing"

    def test_parse_member_returns_it(self):
        assert ProductCategory.parse(ProductCategory.CLOTHING) is ProductCategory.CLOTHING

    @pytest.mark.parametrize("raw", ["electronics", "ELECTRONICS", "Electronics", " electronics "])
    def test_parse_is_case_insensitive(self, raw):
        assert ProductCategory.parse(raw) is ProductCategory.ELECTRONICS

    def test_parse_unknown_rejected(self):
        with pytest.raises(InvalidCategoryError, match="Unknown product category"):
            ProductCategory.parse("furniture")

    def test_parse_non_string_rejected(self):
        with pytest.raises(InvalidCategoryError):
            ProductCategory.parse(42)


class TestProduct:

    def test_creation(self):
        p = Product(name="Smartphone", category=ProductCategory.ELECTRONICS)
        assert p.name == "Smartphone"
        assert p.category == ProductCategory.ELECTRONICS

    def test_is_immutable(self):
        p = Product(name="T-shirt", category=ProductCategory.CLOTHING)
        with pytest.raises(FrozenInstanceError):
            p.category = ProductCategory.ELECTRONICS  # type: ignore[misc]

    def test_empty_name_allowed(self):
        p = Product(name="", category=ProductCategory.CLOTHING)
        assert p.name == ""
