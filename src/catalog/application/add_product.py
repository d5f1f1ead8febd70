"""Application service: Add Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.decorator.product_details import decorator_for
from catalog.domain.factory.product_factory import factory_for
from catalog.domain.model.product import ProductCategory
from catalog.domain.service.product_registry import ProductRegistry


class AddProductHandler:

    def __init__(self, registry: ProductRegistry) -> None:
        self._registry = registry

    def handle(self, category: ProductCategory | str, name: str) -> ProductDTO:
        """Create a product of *category* and save it through the registry.

        Raises InvalidCategoryError before anything is saved if the
        category is unknown.
        """
        product = factory_for(category).create(name)
        details = decorator_for(product).get_details()
        self._registry.save(product)
        return ProductDTO(
            name=product.name,
            category=product.category.value,
            details=details,
        )
