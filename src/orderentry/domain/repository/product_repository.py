"""Abstract repository for the product catalog and its stock levels.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def is_in_stock(self, sku: str) -> bool:
        """Return True if the product with this SKU can currently be sold."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return a product by its SKU, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""
