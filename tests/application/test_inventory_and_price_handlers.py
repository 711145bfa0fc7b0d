"""Tests for the price and inventory maintenance use cases."""

import pytest

from retail.application.set_inventory import SetInventoryHandler
from retail.application.show_inventory import (
    UNKNOWN_PRODUCT,
    InventoryLineDTO,
    ShowInventoryHandler,
)
from retail.application.update_price import UpdatePriceHandler
from retail.domain.exceptions import InvalidArgumentError
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.infrastructure.memory.in_memory_inventory_ledger import (
    InMemoryInventoryLedger,
)
from retail.infrastructure.memory.in_memory_product_catalog import (
    InMemoryProductCatalog,
)


def _catalog() -> InMemoryProductCatalog:
    return InMemoryProductCatalog(
        [
            Product(id=1, name="Laptop", price=Money.of("999.99")),
            Product(id=2, name="Smartphone", price=Money.of("599.99")),
        ]
    )


class TestUpdatePrice:

    def test_updates_price(self):
        catalog = _catalog()
        assert UpdatePriceHandler(catalog).handle(1, "899.50") is True
        assert catalog.find_by_id(1).price == Money.of("899.50")

    def test_zero_price_allowed(self):
        catalog = _catalog()
        UpdatePriceHandler(catalog).handle(1, "0")
        assert catalog.find_by_id(1).price == Money.of("0")

    def test_negative_price_rejected(self):
        catalog = _catalog()
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            UpdatePriceHandler(catalog).handle(1, "-1.00")
        assert catalog.find_by_id(1).price == Money.of("999.99")

    def test_unparseable_price_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Invalid money amount"):
            UpdatePriceHandler(_catalog()).handle(1, "cheap")

    def test_unknown_product_returns_false(self):
        assert UpdatePriceHandler(_catalog()).handle(42, "1.00") is False


class TestSetInventory:

    def test_sets_quantity(self):
        ledger = InMemoryInventoryLedger({1: 10})
        SetInventoryHandler(ledger).handle(1, 3)
        assert ledger.get(1) == 3

    def test_zero_allowed(self):
        ledger = InMemoryInventoryLedger({1: 10})
        SetInventoryHandler(ledger).handle(1, 0)
        assert ledger.get(1) == 0

    def test_product_outside_catalog_allowed(self):
        ledger = InMemoryInventoryLedger()
        SetInventoryHandler(ledger).handle(77, 4)
        assert ledger.get(77) == 4

    def test_negative_rejected(self):
        ledger = InMemoryInventoryLedger({1: 10})
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            SetInventoryHandler(ledger).handle(1, -2)
        assert ledger.get(1) == 10


class TestShowInventory:

    def test_lines_sorted_by_product_id_with_names(self):
        ledger = InMemoryInventoryLedger({2: 20, 1: 10, 9: 1})
        lines = ShowInventoryHandler(ledger, _catalog()).handle()
        assert lines == [
            InventoryLineDTO(product_id=1, product_name="Laptop", quantity=10),
            InventoryLineDTO(product_id=2, product_name="Smartphone", quantity=20),
            InventoryLineDTO(product_id=9, product_name=UNKNOWN_PRODUCT, quantity=1),
        ]

    def test_empty_ledger(self):
        assert ShowInventoryHandler(InMemoryInventoryLedger(), _catalog()).handle() == []
