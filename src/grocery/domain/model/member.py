"""Member entity and its purchase history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterator

from grocery.domain.exceptions import ValidationError
from grocery.domain.model.line_item import LineItem
from grocery.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class Transaction:
    """One purchased line as it appears in a member's history."""

    product_id: str
    product_name: str
    price: Money
    quantity: Quantity
    timestamp: datetime

    @staticmethod
    def from_line_item(item: LineItem, timestamp: datetime) -> Transaction:
        return Transaction(
            product_id=item.product_id,
            product_name=item.product_name,
            price=item.unit_price,
            quantity=item.quantity,
            timestamp=timestamp,
        )


@dataclass
class Member:
    """A store member.

    The transaction list is append-only: ``record_purchase`` is the only
    way entries get in, and nothing takes them out.
    """

    id: str
    name: str
    address: str
    phone: str
    date_joined: date
    fee: Money
    transactions: list[Transaction] = field(default_factory=list)

    @staticmethod
    def create(
        member_id: str,
        name: str,
        address: str,
        phone: str,
        date_joined: date,
        fee: Money,
    ) -> Member:
        """Enroll a new member with an empty purchase history."""
        if not name or not name.strip():
            raise ValidationError("Member name is required")
        return Member(
            id=member_id,
            name=name.strip(),
            address=address.strip(),
            phone=phone.strip(),
            date_joined=date_joined,
            fee=fee,
        )

    def record_purchase(self, item: LineItem, timestamp: datetime) -> Transaction:
        transaction = Transaction.from_line_item(item, timestamp)
        self.transactions.append(transaction)
        return transaction

    def transactions_on(self, on: date) -> Iterator[Transaction]:
        """Yield the transactions whose timestamp falls on the given day."""
        for transaction in self.transactions:
            if transaction.timestamp.date() == on:
                yield transaction
