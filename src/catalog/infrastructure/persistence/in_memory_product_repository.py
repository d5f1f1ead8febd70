"""In-process implementation of ProductRepository.

Nothing is written to disk; saved products live as long as the
repository object does.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._products: list[Product] = []

    def save(self, product: Product) -> None:
        self._products.append(product)

    def list_all(self) -> list[Product]:
        return list(self._products)
