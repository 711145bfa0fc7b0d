"""Reference seed data loaded at startup."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.domain.repository.inventory_ledger import InventoryLedger
from retail.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)

# (id, name, price, quantity in stock)
DEMO_PRODUCTS: tuple[tuple[int, str, str, int], ...] = (
    (1, "Laptop", "999.99", 10),
    (2, "Smartphone", "599.99", 20),
    (3, "Tablet", "299.99", 15),
)


def seed(
    catalog: ProductCatalog,
    ledger: InventoryLedger,
    rows: Iterable[tuple[int, str, str, int]] = DEMO_PRODUCTS,
) -> None:
    count = 0
    for product_id, name, price, quantity in rows:
        catalog.add(Product(id=product_id, name=name, price=Money.of(price)))
        ledger.set(product_id, quantity)
        count += 1
    logger.info("Seeded %d products", count)
