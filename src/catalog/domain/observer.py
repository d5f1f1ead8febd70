"""Observer contract for product save events."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductObserver(ABC):

    @abstractmethod
    def notify(self, product: Product) -> None:
        """Called once per save, after the product has been stored."""
