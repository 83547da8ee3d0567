"""Catalog — the store's product collection.

Keyed by product id and iterated in insertion order. The catalog also
owns the product id sequence so ids stay unique across snapshot reloads.
"""

from __future__ import annotations

from typing import Iterator

from grocery.domain.model.product import Product


class Catalog:

    def __init__(self, products: list[Product] | None = None, sequence: int = 0) -> None:
        self._products: dict[str, Product] = {}
        self._sequence = sequence
        for product in products or []:
            self.insert_product(product)

    @property
    def sequence(self) -> int:
        """Number of product ids issued so far."""
        return self._sequence

    def next_id(self) -> str:
        self._sequence += 1
        return f"P{self._sequence}"

    def insert_product(self, product: Product) -> bool:
        """Add a product. Returns False, leaving the catalog untouched, on an id clash."""
        if product.id in self._products:
            return False
        self._products[product.id] = product
        return True

    def search(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def search_by_name(self, name: str) -> Product | None:
        for product in self._products.values():
            if product.name == name:
                return product
        return None

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products.values()))

    def __len__(self) -> int:
        return len(self._products)
