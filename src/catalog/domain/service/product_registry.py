"""Domain service: Product Registry.

The registry is the subject that products are saved into. It stores each
product through a ProductRepository, logs the save, and then notifies
every registered observer.

There is no hidden global instance. Callers construct a registry (the
composition root does this) and pass it to whatever needs it.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import ObserverNotificationError
from catalog.domain.model.product import Product
from catalog.domain.observer import ProductObserver
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductRegistry:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._observers: list[ProductObserver] = []

    # --- Observer management --------------------------------------------------

    @property
    def observers(self) -> tuple[ProductObserver, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: ProductObserver) -> None:
        """Append *observer*. The same observer may be added twice."""
        self._observers.append(observer)

    def remove_observer(self, observer: ProductObserver) -> None:
        """Remove the first registration of *observer*; no-op if absent."""
        try:
            self._observers.remove(observer)
        except ValueError:
            logger.debug("Observer %r was not registered", observer)

    # --- Saving ---------------------------------------------------------------

    def save(self, product: Product) -> None:
        self._product_repo.save(product)
        logger.info(
            "Product '%s' of type %s saved.", product.name, product.category.value
        )
        self.notify_observers(product)

    def notify_observers(self, product: Product) -> None:
        """Notify observers in registration order.

        Iterates over a snapshot, so an observer that registers or removes
        observers does not change who is notified for this save. The first
        failing observer stops the loop and is reported as an
        ObserverNotificationError.
        """
        for observer in list(self._observers):
            try:
                observer.notify(product)
            except Exception as exc:
                raise ObserverNotificationError(observer, product) from exc

    def saved_products(self) -> list[Product]:
        return self._product_repo.list_all()
