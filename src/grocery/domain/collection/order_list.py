"""OutstandingOrderList — pending reorders, at most one per product.

``add_order`` is the only way in and it refuses a second order for a
product that already has one. Callers check-then-add without a lock;
the store is single-threaded.
"""

from __future__ import annotations

from typing import Iterator

from grocery.domain.model.order import Order


class OutstandingOrderList:

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._orders: dict[str, Order] = {}
        for order in orders or []:
            self.add_order(order)

    def add_order(self, order: Order) -> bool:
        if order.product_id in self._orders:
            return False
        self._orders[order.product_id] = order
        return True

    def search(self, product_id: str) -> Order | None:
        return self._orders.get(product_id)

    def remove_order(self, order: Order) -> bool:
        """Remove exactly this order. A different order for the same product stays."""
        if self._orders.get(order.product_id) != order:
            return False
        del self._orders[order.product_id]
        return True

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._orders.values()))

    def __len__(self) -> int:
        return len(self._orders)
