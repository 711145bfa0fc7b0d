"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from retail.application.ordering_service import OrderingService
from retail.application.sales_reporter import SalesReporter
from retail.application.set_inventory import SetInventoryHandler
from retail.application.show_inventory import ShowInventoryHandler
from retail.application.update_price import UpdatePriceHandler
from retail.domain.repository.inventory_ledger import InventoryLedger
from retail.domain.repository.order_log import OrderLog
from retail.domain.repository.product_catalog import ProductCatalog
from retail.infrastructure.config import Settings
from retail.infrastructure.memory.in_memory_inventory_ledger import (
    InMemoryInventoryLedger,
)
from retail.infrastructure.memory.in_memory_order_log import InMemoryOrderLog
from retail.infrastructure.memory.in_memory_product_catalog import (
    InMemoryProductCatalog,
)
from retail.infrastructure.seed import seed


@dataclass(frozen=True)
class Container:
    catalog: ProductCatalog
    ledger: InventoryLedger
    order_log: OrderLog
    ordering: OrderingService
    reporter: SalesReporter
    update_price: UpdatePriceHandler
    set_inventory: SetInventoryHandler
    show_inventory: ShowInventoryHandler


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or Settings()

    catalog = InMemoryProductCatalog()
    ledger = InMemoryInventoryLedger()
    order_log = InMemoryOrderLog()

    if settings.seed_demo_data:
        seed(catalog, ledger)

    return Container(
        catalog=catalog,
        ledger=ledger,
        order_log=order_log,
        ordering=OrderingService(catalog, ledger, order_log),
        reporter=SalesReporter(order_log),
        update_price=UpdatePriceHandler(catalog),
        set_inventory=SetInventoryHandler(ledger),
        show_inventory=ShowInventoryHandler(ledger, catalog),
    )
