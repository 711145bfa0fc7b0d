"""Tests for the composition root and seed data."""

from retail.domain.model.value_objects import Money
from retail.infrastructure.bootstrap import build_container
from retail.infrastructure.config import Settings
from retail.infrastructure.memory.in_memory_inventory_ledger import (
    InMemoryInventoryLedger,
)
from retail.infrastructure.memory.in_memory_product_catalog import (
    InMemoryProductCatalog,
)
from retail.infrastructure.seed import DEMO_PRODUCTS, seed


class TestBuildContainer:

    def test_seeds_reference_products(self):
        app = build_container(Settings())
        products = app.catalog.list_all()
        assert [(p.id, p.name, p.price) for p in products] == [
            (1, "Laptop", Money.of("999.99")),
            (2, "Smartphone", Money.of("599.99")),
            (3, "Tablet", Money.of("299.99")),
        ]
        assert app.ledger.all_entries() == {1: 10, 2: 20, 3: 15}

    def test_seeding_can_be_disabled(self):
        app = build_container(Settings(seed_demo_data=False))
        assert app.catalog.list_all() == []
        assert app.ledger.all_entries() == {}

    def test_services_share_stores(self):
        app = build_container(Settings())
        app.ordering.place_order(2, 3)
        assert app.ledger.get(2) == 17
        assert app.reporter.summarize()[2].quantity_sold == 3


class TestSeed:

    def test_demo_rows_are_immutable(self):
        assert isinstance(DEMO_PRODUCTS, tuple)

    def test_custom_rows(self):
        catalog, ledger = InMemoryProductCatalog(), InMemoryInventoryLedger()
        seed(catalog, ledger, [(1, "Widget", "10.00", 5)])
        assert catalog.find_by_id(1).price == Money.of("10.00")
        assert ledger.all_entries() == {1: 5}

    def test_repeated_seeding_uses_same_defaults(self):
        for _ in range(2):
            catalog, ledger = InMemoryProductCatalog(), InMemoryInventoryLedger()
            seed(catalog, ledger)
            assert ledger.all_entries() == {1: 10, 2: 20, 3: 15}
