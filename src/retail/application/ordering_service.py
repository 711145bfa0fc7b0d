"""Application service: Place Order use case.

Orchestrates the catalog, the inventory ledger and the order log to
validate and record a single order. This is the only place that
coordinates all three stores.
"""

from __future__ import annotations

import logging

from retail.domain.exceptions import (
    InsufficientInventoryError,
    ProductNotFoundError,
)
from retail.domain.model.order import Order
from retail.domain.model.value_objects import Quantity
from retail.domain.repository.inventory_ledger import InventoryLedger
from retail.domain.repository.order_log import OrderLog
from retail.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class OrderingService:

    def __init__(
        self,
        catalog: ProductCatalog,
        ledger: InventoryLedger,
        order_log: OrderLog,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._order_log = order_log

    def place_order(self, product_id: int, quantity: int) -> Order:
        """Place an order for ``quantity`` units of a product.

        Steps:
        1. Validate the quantity (InvalidArgumentError).
        2. Check available inventory (InsufficientInventoryError).
        3. Look up the product (ProductNotFoundError).
        4. Record the order at the current price and decrement inventory.

        The inventory check runs before the catalog lookup, so an unknown
        product (zero inventory) is reported as insufficient inventory.
        Nothing is mutated unless both checks pass.

        Not safe for concurrent callers: steps 2-4 would need to run
        under one lock per product.
        """
        qty = Quantity(quantity).value

        if not self._ledger.has_at_least(product_id, qty):
            available = self._ledger.get(product_id)
            logger.info(
                "Rejected order for product %s: need %s, have %s",
                product_id, qty, available,
            )
            raise InsufficientInventoryError(
                f"Not enough inventory for product {product_id} "
                f"(need {qty}, have {available})"
            )

        product = self._catalog.find_by_id(product_id)
        if product is None:
            logger.info("Rejected order: product %s not found", product_id)
            raise ProductNotFoundError(f"Product {product_id} not found")

        total = product.price * qty
        order = self._order_log.append(product_id, qty, total)
        self._ledger.decrement(product_id, qty)

        logger.info("Placed %s", order)
        return order
