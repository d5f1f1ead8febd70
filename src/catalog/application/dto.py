"""Data Transfer Objects passed from the application layer to the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    name: str
    category: str
    details: str  # e.g. "Electronics: Smartphone"
