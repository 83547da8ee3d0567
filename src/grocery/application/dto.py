"""Result codes and the field-copy records returned by the store facade.

Nothing in here holds a reference to a live entity: every record is a
frozen copy of the fields a caller may look at, so callers cannot
mutate catalog, roster or order state through a result.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from grocery.domain.model.line_item import LineItem
from grocery.domain.model.member import Member, Transaction
from grocery.domain.model.order import Order
from grocery.domain.model.product import Product


class ResultCode(Enum):
    OPERATION_COMPLETED = "OPERATION_COMPLETED"
    OPERATION_FAILED = "OPERATION_FAILED"
    ORDER_PLACED = "ORDER_PLACED"
    NO_SUCH_MEMBER = "NO_SUCH_MEMBER"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str  # formatted, e.g. "$2.50"
    stock: int
    reorder_level: int


@dataclass(frozen=True)
class MemberDTO:
    id: str
    name: str
    address: str
    phone: str
    date_joined: date
    fee: str


@dataclass(frozen=True)
class OrderDTO:
    product_id: str
    product_name: str
    quantity: int


@dataclass(frozen=True)
class LineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class TransactionDTO:
    product_id: str
    product_name: str
    price: str
    quantity: int
    timestamp: datetime


@dataclass(frozen=True)
class Result:
    """Uniform outcome of a facade operation.

    Only the field sets relevant to the operation are populated; the
    rest stay ``None`` (or empty for ``line_items``).
    """

    code: ResultCode
    product: ProductDTO | None = None
    member: MemberDTO | None = None
    order: OrderDTO | None = None
    line_item: LineItemDTO | None = None
    line_items: tuple[LineItemDTO, ...] = ()
    total: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.code in (ResultCode.OPERATION_COMPLETED, ResultCode.ORDER_PLACED)


# --- Mapping ------------------------------------------------------------------


def product_fields(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        stock=product.stock,
        reorder_level=product.reorder_level,
    )


def member_fields(member: Member) -> MemberDTO:
    return MemberDTO(
        id=member.id,
        name=member.name,
        address=member.address,
        phone=member.phone,
        date_joined=member.date_joined,
        fee=str(member.fee),
    )


def order_fields(order: Order) -> OrderDTO:
    return OrderDTO(
        product_id=order.product_id,
        product_name=order.product_name,
        quantity=order.quantity_ordered,
    )


def line_item_fields(item: LineItem) -> LineItemDTO:
    return LineItemDTO(
        product_id=item.product_id,
        product_name=item.product_name,
        quantity=item.quantity.value,
        unit_price=str(item.unit_price),
        line_total=str(item.line_total),
    )


def transaction_fields(transaction: Transaction) -> TransactionDTO:
    return TransactionDTO(
        product_id=transaction.product_id,
        product_name=transaction.product_name,
        price=str(transaction.price),
        quantity=transaction.quantity.value,
        timestamp=transaction.timestamp,
    )
