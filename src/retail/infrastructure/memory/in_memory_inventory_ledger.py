"""In-memory implementation of InventoryLedger."""

from __future__ import annotations

import logging

from retail.domain.repository.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class InMemoryInventoryLedger(InventoryLedger):

    def __init__(self, quantities: dict[int, int] | None = None) -> None:
        self._quantities: dict[int, int] = dict(quantities or {})

    def set(self, product_id: int, quantity: int) -> None:
        self._quantities[product_id] = quantity
        logger.debug("Inventory for product %s set to %s", product_id, quantity)

    def get(self, product_id: int) -> int:
        return self._quantities.get(product_id, 0)

    def all_entries(self) -> dict[int, int]:
        return dict(self._quantities)
