"""Abstract store for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money


class ProductCatalog(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Insert a product. Id uniqueness is the caller's responsibility."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return the first product with this id, or None if not found."""

    @abstractmethod
    def update_price(self, product_id: int, new_price: Money) -> bool:
        """Set a product's price; a silent no-op for unknown ids.

        Returns True when a product was updated.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""
