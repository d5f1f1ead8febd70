"""Detail decorators: derive a display string from a product.

Decorators hold a reference to the product they wrap and never
modify it.
"""

from __future__ import annotations

from abc import ABC

from catalog.domain.model.product import Product, ProductCategory


class ProductDetailsDecorator(ABC):

    label: str

    def __init__(self, product: Product) -> None:
        self._product = product

    @property
    def product(self) -> Product:
        return self._product

    def get_details(self) -> str:
        return f"{self.label}: {self._product.name}"


class ElectronicsDetailsDecorator(ProductDetailsDecorator):

    label = "Electronics"


class ClothingDetailsDecorator(ProductDetailsDecorator):

    label = "Clothing"


_DECORATORS: dict[ProductCategory, type[ProductDetailsDecorator]] = {
    ProductCategory.ELECTRONICS: ElectronicsDetailsDecorator,
    ProductCategory.CLOTHING: ClothingDetailsDecorator,
}


def decorator_for(product: Product) -> ProductDetailsDecorator:
    """Wrap *product* in the decorator matching its category."""
    return _DECORATORS[product.category](product)


def describe(product: Product) -> str:
    return decorator_for(product).get_details()
