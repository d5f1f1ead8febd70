"""Abstract repository for saved products.

Defined in the domain layer so the registry never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> None:
        """Store a product. Duplicates are kept."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every saved product in save order."""
