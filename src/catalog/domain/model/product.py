"""Product entity.

A product is nothing more than a name tagged with exactly one category.
The category is fixed at creation, so the dataclass is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catalog.domain.exceptions import InvalidCategoryError


class ProductCategory(Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"

    @staticmethod
    def parse(raw: ProductCategory | str) -> ProductCategory:
        """Accept a member, or its name/value in any letter case."""
        if isinstance(raw, ProductCategory):
            return raw
        if isinstance(raw, str):
            wanted = raw.strip().lower()
            for category in ProductCategory:
                if wanted in (category.name.lower(), category.value.lower()):
                    return category
        raise InvalidCategoryError(f"Unknown product category: {raw!r}")


@dataclass(frozen=True)
class Product:
    """A catalog entry.

    Names are not validated: empty and duplicate names are allowed.
    """

    name: str
    category: ProductCategory
