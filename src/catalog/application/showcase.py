"""Application service: Showcase use case.

Runs the store's demonstration flow end to end: two factories create a
smartphone and a T-shirt, their decorators describe them, an email
notifier is registered, and both products are saved.
"""

from __future__ import annotations

from collections.abc import Callable

from catalog.application.dto import ProductDTO
from catalog.domain.decorator.product_details import (
    ClothingDetailsDecorator,
    ElectronicsDetailsDecorator,
    ProductDetailsDecorator,
)
from catalog.domain.factory.product_factory import (
    ClothingProductFactory,
    ElectronicsProductFactory,
    ProductFactory,
)
from catalog.domain.observer import ProductObserver
from catalog.domain.service.product_registry import ProductRegistry


class ShowcaseHandler:

    def __init__(
        self,
        registry: ProductRegistry,
        notifier: ProductObserver,
        echo: Callable[[str], None],
    ) -> None:
        self._registry = registry
        self._notifier = notifier
        self._echo = echo

    def handle(self) -> list[ProductDTO]:
        electronics_factory: ProductFactory = ElectronicsProductFactory()
        clothing_factory: ProductFactory = ClothingProductFactory()

        smartphone = electronics_factory.create("Smartphone")
        t_shirt = clothing_factory.create("T-shirt")

        decorated: list[ProductDetailsDecorator] = [
            ElectronicsDetailsDecorator(smartphone),
            ClothingDetailsDecorator(t_shirt),
        ]
        for decorator in decorated:
            self._echo(decorator.get_details())

        self._registry.add_observer(self._notifier)

        for decorator in decorated:
            self._registry.save(decorator.product)

        return [
            ProductDTO(
                name=d.product.name,
                category=d.product.category.value,
                details=d.get_details(),
            )
            for d in decorated
        ]
