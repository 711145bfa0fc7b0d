"""Abstract append-only store for placed orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from retail.domain.model.order import Order
from retail.domain.model.value_objects import Money


class OrderLog(ABC):

    @abstractmethod
    def append(self, product_id: int, quantity: int, total_price: Money) -> Order:
        """Record a new order with the next sequential id and the current time."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in append order, as a copy."""
