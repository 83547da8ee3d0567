"""Order — an outstanding restock request for one product."""

from __future__ import annotations

from dataclasses import dataclass

from grocery.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Order:
    """A pending reorder.

    Refers to its product by id only; ``product_name`` is a snapshot
    taken when the order was placed. Orders are never modified: a
    processed shipment removes the order from the outstanding list.

    ``quantity_ordered`` may be zero: an automatic reorder is always
    for twice the reorder level, and a product whose level is zero
    still gets its order placed.
    """

    product_id: str
    product_name: str
    quantity_ordered: int

    def __post_init__(self) -> None:
        if isinstance(self.quantity_ordered, bool) or not isinstance(self.quantity_ordered, int):
            raise ValidationError("Order quantity must be an integer")
        if self.quantity_ordered < 0:
            raise ValidationError("Order quantity cannot be negative")
