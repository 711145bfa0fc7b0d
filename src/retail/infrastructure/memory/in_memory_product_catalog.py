"""In-memory implementation of ProductCatalog."""

from __future__ import annotations

import logging

from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class InMemoryProductCatalog(ProductCatalog):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    def add(self, product: Product) -> None:
        self._products.append(product)
        logger.debug("Added product %s", product)

    def find_by_id(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def update_price(self, product_id: int, new_price: Money) -> bool:
        product = self.find_by_id(product_id)
        if product is None:
            logger.debug("Price update ignored, no product with id %s", product_id)
            return False
        product.update_price(new_price)
        logger.debug("Product %s price set to %s", product_id, new_price)
        return True

    def list_all(self) -> list[Product]:
        return list(self._products)
