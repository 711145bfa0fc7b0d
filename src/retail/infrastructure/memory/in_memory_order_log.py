"""In-memory implementation of OrderLog."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from retail.domain.model.order import Order
from retail.domain.model.value_objects import Money
from retail.domain.repository.order_log import OrderLog

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryOrderLog(OrderLog):

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._orders: list[Order] = []
        self._clock = clock
        # Only touched on a successful append, so ids are never skipped.
        self._last_id = 0

    def append(self, product_id: int, quantity: int, total_price: Money) -> Order:
        order = Order(
            id=self._last_id + 1,
            product_id=product_id,
            quantity=quantity,
            total_price=total_price,
            created_at=self._clock(),
        )
        self._orders.append(order)
        self._last_id = order.id
        logger.debug("Recorded %s", order)
        return order

    def list_all(self) -> list[Order]:
        return list(self._orders)
