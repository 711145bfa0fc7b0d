"""Product entity.

Products live independently of orders. A product's price may change over
its lifetime; its id and name never do.
"""

from __future__ import annotations

from retail.domain.model.value_objects import Money


class Product:
    """A sellable product in the catalog.

    ``id`` and ``name`` are read-only properties; ``price`` changes only
    through ``update_price``.
    """

    def __init__(self, id: int, name: str, price: Money) -> None:
        self._id = id
        self._name = name
        self._price = price

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing orders are unaffected: each order stores its own total.
        """
        self._price = new_price

    def __repr__(self) -> str:
        return f"Product(id={self._id!r}, name={self._name!r}, price={self._price!r})"

    def __str__(self) -> str:
        return f"Product{{id={self._id}, name='{self._name}', price={self._price.amount:.2f}}}"
