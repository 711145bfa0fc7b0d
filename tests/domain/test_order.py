"""Unit tests for the Order record."""

import dataclasses
from datetime import datetime, timezone

import pytest

from retail.domain.model.order import Order
from retail.domain.model.value_objects import Money


def _make_order() -> Order:
    return Order(
        id=1,
        product_id=1,
        quantity=3,
        total_price=Money.of("30.00"),
        created_at=datetime(2026, 1, 1, 10, 0, 0, tzinfo=timezone.utc),
    )


class TestOrder:

    def test_is_immutable(self):
        order = _make_order()
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.quantity = 5

    def test_str(self):
        assert str(_make_order()) == (
            "Order{id=1, productId=1, quantity=3, totalPrice=30.00, "
            "orderTime=2026-01-01 10:00:00}"
        )
