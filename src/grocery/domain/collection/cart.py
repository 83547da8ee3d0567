"""Cart — line items of the purchase currently in progress.

Transient: the cart is never part of a snapshot.
"""

from __future__ import annotations

from typing import Iterator

from grocery.domain.model.line_item import LineItem
from grocery.domain.model.value_objects import Money


class Cart:

    def __init__(self) -> None:
        self._items: list[LineItem] = []
        self.member_id: str | None = None

    def start(self, member_id: str) -> None:
        """Empty the cart and bind it to the member who is checking out."""
        self.clear()
        self.member_id = member_id

    def add_line_item(self, item: LineItem) -> bool:
        self._items.append(item)
        return True

    def clear(self) -> None:
        self._items.clear()
        self.member_id = None

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.line_total
        return result

    def __iter__(self) -> Iterator[LineItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
