"""Product factories.

Each factory is stateless and always produces products of its own
category. Use ``factory_for()`` to pick one from a category tag.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product, ProductCategory


class ProductFactory(ABC):

    category: ProductCategory

    @abstractmethod
    def create(self, name: str) -> Product:
        """Return a new product of this factory's category."""


class ElectronicsProductFactory(ProductFactory):

    category = ProductCategory.ELECTRONICS

    def create(self, name: str) -> Product:
        return Product(name=name, category=self.category)


class ClothingProductFactory(ProductFactory):

    category = ProductCategory.CLOTHING

    def create(self, name: str) -> Product:
        return Product(name=name, category=self.category)


_FACTORIES: dict[ProductCategory, type[ProductFactory]] = {
    ProductCategory.ELECTRONICS: ElectronicsProductFactory,
    ProductCategory.CLOTHING: ClothingProductFactory,
}


def factory_for(category: ProductCategory | str) -> ProductFactory:
    """Return the factory for *category*.

    Raises InvalidCategoryError for anything that is not a known category.
    """
    return _FACTORIES[ProductCategory.parse(category)]()
