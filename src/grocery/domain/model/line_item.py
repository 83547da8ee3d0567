"""LineItem — one product/quantity entry of a purchase."""

from __future__ import annotations

from dataclasses import dataclass

from grocery.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class LineItem:
    """Immutable record of a single purchase event.

    ``unit_price`` is the shelf price at the moment the item went into
    the cart; later price changes do not touch it.
    """

    product_id: str
    product_name: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value
