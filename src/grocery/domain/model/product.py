"""Product entity.

Products are created through the catalog and never deleted. Stock and
price are the only fields that change after creation.
"""

from __future__ import annotations

from dataclasses import dataclass

from grocery.domain.exceptions import ValidationError
from grocery.domain.model.value_objects import Money

# Automatic reorders are always for this multiple of the reorder level.
REORDER_MULTIPLIER = 2


@dataclass
class Product:
    """A product on the shelf.

    ``stock`` is a plain int rather than a ``Quantity``: it starts at
    zero and, when the store runs with negative stock allowed, it may
    drop below zero.
    """

    id: str
    name: str
    price: Money
    reorder_level: int
    stock: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.reorder_level, bool) or not isinstance(self.reorder_level, int):
            raise ValidationError("Reorder level must be an integer")
        if self.reorder_level < 0:
            raise ValidationError("Reorder level cannot be negative")
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError("Stock must be an integer")

    @staticmethod
    def create(product_id: str, name: str, price: Money, reorder_level: int) -> Product:
        """Create a newly catalogued product with no stock."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        return Product(
            id=product_id,
            name=name.strip(),
            price=price,
            reorder_level=reorder_level,
        )

    def update_stock(self, delta: int) -> None:
        self.stock += delta

    def update_price(self, new_price: Money) -> None:
        """Change the shelf price.

        Line items and transactions already recorded keep the price
        they were created with.
        """
        self.price = new_price

    @property
    def at_or_below_reorder_level(self) -> bool:
        return self.stock <= self.reorder_level

    @property
    def reorder_quantity(self) -> int:
        return self.reorder_level * REORDER_MULTIPLIER
