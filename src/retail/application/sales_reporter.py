"""Application service: Sales Report use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.model.value_objects import Money
from retail.domain.repository.order_log import OrderLog


@dataclass(frozen=True)
class ProductSales:
    """Aggregate sales figures for one product."""

    total_sales: Money
    quantity_sold: int


class SalesReporter:

    def __init__(self, order_log: OrderLog) -> None:
        self._order_log = order_log

    def summarize(self) -> dict[int, ProductSales]:
        """Sum order totals and quantities per product id.

        Single pass over the order log; iteration order of the result is
        not meaningful.
        """
        totals: dict[int, Money] = {}
        quantities: dict[int, int] = {}

        for order in self._order_log.list_all():
            pid = order.product_id
            totals[pid] = totals.get(pid, Money.zero()) + order.total_price
            quantities[pid] = quantities.get(pid, 0) + order.quantity

        return {
            pid: ProductSales(total_sales=totals[pid], quantity_sold=quantities[pid])
            for pid in totals
        }
