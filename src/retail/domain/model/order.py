"""Order record.

An Order is the immutable trace of one accepted purchase. Orders are
created only by the order log, which owns id assignment and timestamps.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from retail.domain.model.value_objects import Money

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Order:
    """A completed purchase of a single product.

    ``total_price`` is the unit price times quantity at the moment the
    order was placed and is never recomputed. ``product_id`` is a soft
    reference: nothing checks it against the catalog after creation.
    """

    id: int
    product_id: int
    quantity: int
    total_price: Money
    created_at: datetime

    def __str__(self) -> str:
        return (
            f"Order{{id={self.id}, productId={self.product_id}, "
            f"quantity={self.quantity}, totalPrice={self.total_price.amount:.2f}, "
            f"orderTime={self.created_at.strftime(TIMESTAMP_FORMAT)}}}"
        )
