"""Application service: Update Product Price use case."""

from __future__ import annotations

from decimal import Decimal

from retail.domain.model.value_objects import Money
from retail.domain.repository.product_catalog import ProductCatalog


class UpdatePriceHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, product_id: int, new_price: str | int | Decimal) -> bool:
        """Set a product's price.

        Raises InvalidArgumentError for a negative or unparseable price.
        An unknown product id is not an error; returns False instead.
        Existing orders keep the total they were placed with.
        """
        return self._catalog.update_price(product_id, Money.of(new_price))
