"""Domain-level exceptions.

All catalog errors are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalog.domain.model.product import Product
    from catalog.domain.observer import ProductObserver


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidCategoryError(DomainException):
    """A product category was requested that no factory knows about."""


class ObserverNotificationError(DomainException):
    """An observer's callback raised while being notified of a save."""

    def __init__(self, observer: ProductObserver, product: Product) -> None:
        self.observer = observer
        self.product = product
        super().__init__(
            f"Observer {type(observer).__name__} failed to handle "
            f"product '{product.name}'"
        )
