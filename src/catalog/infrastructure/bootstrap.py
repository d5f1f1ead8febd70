"""Wiring for the catalog's concrete pieces.

Each call builds new objects: ``product_registry()`` returns a registry
backed by its own in-memory repository with no observers attached. Callers
decide which notifiers to register.
"""

from __future__ import annotations

from catalog.domain.service.product_registry import ProductRegistry
from catalog.infrastructure.notifications.email_notifier import EmailNotifier
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


def product_registry() -> ProductRegistry:
    return ProductRegistry(product_repository())


def email_notifier() -> EmailNotifier:
    return EmailNotifier()
