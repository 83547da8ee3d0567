"""JSON-file-backed persistence for whole-store snapshots.

A single file holds everything: products, members with their
transaction logs, outstanding orders and the id sequences. Loading and
saving are all-or-nothing. A save writes a sibling temporary file and
then swaps it into place, and a load either rebuilds the whole store or
returns ``None``.
"""

from __future__ import annotations

import json
import logging
import os
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from grocery.application.grocery_store import GroceryStore
from grocery.application.snapshot import StoreSnapshot
from grocery.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from grocery.domain.model.member import Member, Transaction
from grocery.domain.model.order import Order
from grocery.domain.model.product import Product
from grocery.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

_PRODUCT_ID = re.compile(r"P(\d+)")
_MEMBER_ID = re.compile(r"M(\d+)")


class JsonSnapshotRepository:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def exists(self) -> bool:
        return self._file_path.exists()

    def save(self, store: GroceryStore) -> bool:
        """Write the store's snapshot. Returns False if it could not be written."""
        raw = self._to_raw(store.snapshot())
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError:
            logger.exception("Could not save store snapshot to %s", self._file_path)
            return False
        logger.info("Saved store snapshot to %s", self._file_path)
        return True

    def load(self, *, allow_negative_stock: bool = False) -> GroceryStore | None:
        """Rebuild a store from disk, or None if there is nothing usable to load."""
        if not self._file_path.exists():
            logger.info("No store snapshot at %s", self._file_path)
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            snapshot = self._to_domain(raw)
        except (
            OSError,
            ValueError,
            KeyError,
            TypeError,
            AttributeError,
            InvalidOperation,
            DomainException,
        ):
            logger.exception("Could not load store snapshot from %s", self._file_path)
            return None
        logger.info(
            "Loaded store snapshot from %s (%d products, %d members, %d orders)",
            self._file_path,
            len(snapshot.products),
            len(snapshot.members),
            len(snapshot.orders),
        )
        return GroceryStore.from_snapshot(
            snapshot, allow_negative_stock=allow_negative_stock
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(snapshot: StoreSnapshot) -> dict:
        return {
            "version": FORMAT_VERSION,
            "product_sequence": snapshot.product_sequence,
            "member_sequence": snapshot.member_sequence,
            "products": [
                {
                    "id": p.id,
                    "name": p.name,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "stock": p.stock,
                    "reorder_level": p.reorder_level,
                }
                for p in snapshot.products
            ],
            "members": [
                {
                    "id": m.id,
                    "name": m.name,
                    "address": m.address,
                    "phone": m.phone,
                    "date_joined": m.date_joined.isoformat(),
                    "fee": str(m.fee.amount),
                    "currency": m.fee.currency,
                    "transactions": [
                        {
                            "product_id": t.product_id,
                            "product_name": t.product_name,
                            "price": str(t.price.amount),
                            "currency": t.price.currency,
                            "quantity": t.quantity.value,
                            "timestamp": t.timestamp.isoformat(),
                        }
                        for t in m.transactions
                    ],
                }
                for m in snapshot.members
            ],
            "orders": [
                {
                    "product_id": o.product_id,
                    "product_name": o.product_name,
                    "quantity_ordered": o.quantity_ordered,
                }
                for o in snapshot.orders
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> StoreSnapshot:
        version = raw.get("version")
        if version != FORMAT_VERSION:
            raise ValueError(f"Unsupported snapshot version {version!r}")

        products = tuple(
            Product(
                id=p["id"],
                name=p["name"],
                price=Money(Decimal(p["price"]), p.get("currency", "USD")),
                reorder_level=p["reorder_level"],
                stock=p["stock"],
            )
            for p in raw["products"]
        )
        members = tuple(
            Member(
                id=m["id"],
                name=m["name"],
                address=m["address"],
                phone=m["phone"],
                date_joined=date.fromisoformat(m["date_joined"]),
                fee=Money(Decimal(m["fee"]), m.get("currency", "USD")),
                transactions=[
                    Transaction(
                        product_id=t["product_id"],
                        product_name=t["product_name"],
                        price=Money(Decimal(t["price"]), t.get("currency", "USD")),
                        quantity=Quantity(t["quantity"]),
                        timestamp=datetime.fromisoformat(t["timestamp"]),
                    )
                    for t in m["transactions"]
                ],
            )
            for m in raw["members"]
        )
        orders = tuple(
            Order(
                product_id=o["product_id"],
                product_name=o["product_name"],
                quantity_ordered=o["quantity_ordered"],
            )
            for o in raw["orders"]
        )

        product_ids = {p.id for p in products}
        if len(product_ids) != len(products):
            raise ValueError("Snapshot contains duplicate product ids")
        if len({m.id for m in members}) != len(members):
            raise ValueError("Snapshot contains duplicate member ids")
        if len({o.product_id for o in orders}) != len(orders):
            raise ValueError("Snapshot contains more than one order for a product")
        for order in orders:
            if order.product_id not in product_ids:
                raise EntityNotFoundError(
                    f"Order refers to unknown product '{order.product_id}'"
                )

        return StoreSnapshot(
            products=products,
            members=members,
            orders=orders,
            product_sequence=_reconciled_sequence(
                raw["product_sequence"], (p.id for p in products), _PRODUCT_ID
            ),
            member_sequence=_reconciled_sequence(
                raw["member_sequence"], (m.id for m in members), _MEMBER_ID
            ),
        )


def _reconciled_sequence(sequence, ids, pattern: re.Pattern) -> int:
    """The stored sequence, raised past any generated id already in use.

    Ids that do not follow the generated pattern are ignored.
    """
    if isinstance(sequence, bool) or not isinstance(sequence, int):
        raise ValidationError("Id sequence must be an integer")
    if sequence < 0:
        raise ValidationError("Id sequence cannot be negative")
    used = [int(match.group(1)) for match in map(pattern.fullmatch, ids) if match]
    return max([sequence, *used])
