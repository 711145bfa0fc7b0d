"""Abstract store for per-product available quantities."""

from __future__ import annotations

from abc import ABC, abstractmethod


class InventoryLedger(ABC):
    """Pure arithmetic store: no method here enforces non-negativity.

    A product without an entry has quantity 0.
    """

    @abstractmethod
    def set(self, product_id: int, quantity: int) -> None:
        """Overwrite the stored quantity unconditionally."""

    @abstractmethod
    def get(self, product_id: int) -> int:
        """Return the stored quantity, or 0 when there is no entry."""

    @abstractmethod
    def all_entries(self) -> dict[int, int]:
        """Return a snapshot of every entry."""

    def has_at_least(self, product_id: int, quantity: int) -> bool:
        return self.get(product_id) >= quantity

    def decrement(self, product_id: int, quantity: int) -> None:
        """Subtract ``quantity``. Callers check ``has_at_least`` first."""
        self.set(product_id, self.get(product_id) - quantity)
