"""Unit tests for the detail decorators."""

import pytest

from catalog.domain.decorator.product_details import (
    ClothingDetailsDecorator,
    ElectronicsDetailsDecorator,
    decorator_for,
    describe,
)
from catalog.domain.model.product import Product, ProductCategory


class TestDetailsDecorators:

    def test_smartphone_details(self):
        p = Product("Smartphone", ProductCategory.ELECTRONICS)
        assert ElectronicsDetailsDecorator(p).get_details() == "Electronics: Smartphone"

    def test_t_shirt_details(self):
        p = Product("T-shirt", ProductCategory.CLOTHING)
        assert ClothingDetailsDecorator(p).get_details() == "Clothing: T-shirt"

    def test_wrapped_product_is_same_reference(self):
        p = Product("Jacket", ProductCategory.CLOTHING)
        decorator = ClothingDetailsDecorator(p)
        decorator.get_details()
        assert decorator.product is p
        assert p == Product("Jacket", ProductCategory.CLOTHING)


class TestDecoratorFor:

    @pytest.mark.parametrize(
        "category, label",
        [(ProductCategory.ELECTRONICS, "Electronics"), (ProductCategory.CLOTHING, "Clothing")],
    )
    def test_details_contain_label_and_name(self, category, label):
        p = Product("Thing", category)
        details = decorator_for(p).get_details()
        assert label in details
        assert "Thing" in details

    def test_picks_matching_decorator(self):
        p = Product("TV", ProductCategory.ELECTRONICS)
        assert isinstance(decorator_for(p), ElectronicsDetailsDecorator)

    def test_describe_matches_decorator(self):
        p = Product("Scarf", ProductCategory.CLOTHING)
        assert describe(p) == "Clothing: Scarf"
