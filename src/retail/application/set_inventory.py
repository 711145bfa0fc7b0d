"""Application service: Set Inventory use case."""

from __future__ import annotations

from retail.domain.exceptions import InvalidArgumentError
from retail.domain.repository.inventory_ledger import InventoryLedger


class SetInventoryHandler:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def handle(self, product_id: int, quantity: int) -> None:
        """Set the available quantity for a product.

        The product does not have to be in the catalog.
        """
        if quantity < 0:
            raise InvalidArgumentError(
                f"Inventory quantity cannot be negative, got {quantity}"
            )
        self._ledger.set(product_id, quantity)
