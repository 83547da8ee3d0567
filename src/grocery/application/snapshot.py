"""StoreSnapshot — the whole persistent state of a store.

Holds deep copies, so a snapshot taken from a running store is not
affected by later operations on that store (and vice versa).
"""

from __future__ import annotations

import copy
from dataclasses import dataclass

from grocery.domain.model.member import Member
from grocery.domain.model.order import Order
from grocery.domain.model.product import Product


@dataclass(frozen=True)
class StoreSnapshot:

    products: tuple[Product, ...]
    members: tuple[Member, ...]
    orders: tuple[Order, ...]
    product_sequence: int = 0
    member_sequence: int = 0

    @staticmethod
    def capture(
        products: list[Product],
        members: list[Member],
        orders: list[Order],
        product_sequence: int,
        member_sequence: int,
    ) -> StoreSnapshot:
        return StoreSnapshot(
            products=tuple(copy.deepcopy(products)),
            members=tuple(copy.deepcopy(members)),
            orders=tuple(orders),  # frozen
            product_sequence=product_sequence,
            member_sequence=member_sequence,
        )

    def copy_products(self) -> list[Product]:
        return copy.deepcopy(list(self.products))

    def copy_members(self) -> list[Member]:
        return copy.deepcopy(list(self.members))
