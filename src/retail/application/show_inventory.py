"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.repository.inventory_ledger import InventoryLedger
from retail.domain.repository.product_catalog import ProductCatalog

UNKNOWN_PRODUCT = "<unknown>"


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: int
    product_name: str
    quantity: int


class ShowInventoryHandler:

    def __init__(self, ledger: InventoryLedger, catalog: ProductCatalog) -> None:
        self._ledger = ledger
        self._catalog = catalog

    def handle(self) -> list[InventoryLineDTO]:
        lines = []
        for product_id, quantity in sorted(self._ledger.all_entries().items()):
            product = self._catalog.find_by_id(product_id)
            lines.append(
                InventoryLineDTO(
                    product_id=product_id,
                    product_name=product.name if product else UNKNOWN_PRODUCT,
                    quantity=quantity,
                )
            )
        return lines
