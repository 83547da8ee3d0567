"""GroceryStore — the single entry point for every store operation.

The facade owns the catalog, the member roster, the outstanding order
list and the cart, and it is the only place that coordinates across
them. Every operation reports its outcome as a ``Result`` carrying a
``ResultCode``; business failures are never raised to the caller.

Stock/reorder reconciliation:

* a purchase (``add_line_item``) decrements stock;
* when stock ends at or below the reorder level and the product has no
  outstanding order, an order for twice the reorder level is placed;
* ``process_shipment`` credits the ordered quantity back to stock and
  closes the order.

The at-most-one-order check and the insert that follows are not atomic.
The store is single-threaded; concurrent callers would need a lock
around ``_decrease_stock`` and ``create_order``.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

from grocery.application.dto import (
    Result,
    ResultCode,
    TransactionDTO,
    line_item_fields,
    member_fields,
    order_fields,
    product_fields,
    transaction_fields,
)
from grocery.application.safe_iterator import SafeIterator
from grocery.application.snapshot import StoreSnapshot
from grocery.domain.collection.cart import Cart
from grocery.domain.collection.catalog import Catalog
from grocery.domain.collection.member_list import MemberList
from grocery.domain.collection.order_list import OutstandingOrderList
from grocery.domain.exceptions import ValidationError
from grocery.domain.model.line_item import LineItem
from grocery.domain.model.member import Member
from grocery.domain.model.order import Order
from grocery.domain.model.product import Product
from grocery.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)

_FAILED = Result(ResultCode.OPERATION_FAILED)


class GroceryStore:

    def __init__(
        self,
        catalog: Catalog | None = None,
        members: MemberList | None = None,
        orders: OutstandingOrderList | None = None,
        cart: Cart | None = None,
        *,
        allow_negative_stock: bool = False,
    ) -> None:
        self._catalog = catalog if catalog is not None else Catalog()
        self._members = members if members is not None else MemberList()
        self._orders = orders if orders is not None else OutstandingOrderList()
        self._cart = cart if cart is not None else Cart()
        self._allow_negative_stock = allow_negative_stock

    @property
    def allow_negative_stock(self) -> bool:
        """Whether a purchase may take stock below zero.

        When False (the default) a purchase larger than the current
        stock is rejected and nothing changes. When True the purchase
        goes through and stock may end up negative.
        """
        return self._allow_negative_stock

    # --- Products -------------------------------------------------------------

    def add_product(
        self, name: str, price: str | Decimal, reorder_level: int
    ) -> Result:
        """Catalog a new product with zero stock.

        Names must be unique (exact match); a clash is rejected rather
        than overwriting the existing product.
        """
        if name and self._catalog.search_by_name(name.strip()) is not None:
            logger.debug("Rejected product '%s': name already catalogued", name)
            return _FAILED
        try:
            product = Product.create(
                product_id=self._catalog.next_id(),
                name=name,
                price=Money.of(price),
                reorder_level=reorder_level,
            )
        except ValidationError as exc:
            logger.debug("Rejected product '%s': %s", name, exc)
            return _FAILED

        if not self._catalog.insert_product(product):
            logger.debug("Rejected product '%s': id %s taken", name, product.id)
            return _FAILED
        logger.info("Catalogued product %s '%s'", product.id, product.name)
        return Result(ResultCode.OPERATION_COMPLETED, product=product_fields(product))

    def change_price(self, product_id: str, price: str | Decimal) -> Result:
        product = self._catalog.search(product_id)
        if product is None:
            return _FAILED
        try:
            product.update_price(Money.of(price))
        except ValidationError as exc:
            logger.debug("Rejected price for %s: %s", product_id, exc)
            return _FAILED
        return Result(ResultCode.OPERATION_COMPLETED, product=product_fields(product))

    def retrieve_product_info(self, name: str) -> Result:
        """Look a product up by its exact name."""
        product = self._catalog.search_by_name(name)
        if product is None:
            return Result(ResultCode.PRODUCT_NOT_FOUND)
        return Result(ResultCode.OPERATION_COMPLETED, product=product_fields(product))

    def retrieve_product_request(self, product_id: str) -> Result:
        product = self._catalog.search(product_id)
        if product is None:
            return Result(ResultCode.PRODUCT_NOT_FOUND)
        return Result(ResultCode.OPERATION_COMPLETED, product=product_fields(product))

    # --- Purchases ------------------------------------------------------------

    def start_checkout(self, member_id: str) -> Result:
        """Begin a purchase for a member, discarding any unfinished cart."""
        member = self._members.search(member_id)
        if member is None:
            return Result(ResultCode.NO_SUCH_MEMBER)
        self._cart.start(member.id)
        return Result(ResultCode.OPERATION_COMPLETED, member=member_fields(member))

    def add_line_item(self, product_id: str, quantity: int) -> Result:
        """Put a product into the cart and take it off the shelf.

        Returns ``ORDER_PLACED`` when the purchase triggered a reorder,
        ``OPERATION_COMPLETED`` otherwise. The result echoes the line
        item and the product's updated fields.
        """
        product = self._catalog.search(product_id)
        if product is None:
            return Result(ResultCode.PRODUCT_NOT_FOUND)
        try:
            qty = Quantity(quantity)
        except ValidationError as exc:
            logger.debug("Rejected purchase of %s: %s", product_id, exc)
            return _FAILED
        if not self._allow_negative_stock and qty.value > product.stock:
            logger.debug(
                "Rejected purchase of %s: need %d, have %d in stock",
                product_id, qty.value, product.stock,
            )
            return _FAILED

        item = LineItem(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,  # price snapshot
            quantity=qty,
        )
        if not self._cart.add_line_item(item):
            return _FAILED

        code = self._decrease_stock(product, qty.value)
        return Result(
            code,
            product=product_fields(product),
            line_item=line_item_fields(item),
        )

    def complete_checkout(self, purchased_at: datetime | None = None) -> Result:
        """Record the cart in the member's history and empty it.

        Fails if no checkout was started. Stock was already taken when
        each line item was added, so this only touches the member.
        """
        member_id = self._cart.member_id
        if member_id is None:
            return _FAILED
        member = self._members.search(member_id)
        if member is None:
            self._cart.clear()
            return Result(ResultCode.NO_SUCH_MEMBER)

        timestamp = purchased_at or datetime.now()
        items = list(self._cart)
        for item in items:
            member.record_purchase(item, timestamp)
        total = self._cart.total
        self._cart.clear()
        logger.info(
            "Checkout for %s: %d line item(s), total %s", member.id, len(items), total
        )
        return Result(
            ResultCode.OPERATION_COMPLETED,
            member=member_fields(member),
            line_items=tuple(line_item_fields(item) for item in items),
            total=str(total),
        )

    def _decrease_stock(self, product: Product, quantity: int) -> ResultCode:
        product.update_stock(-quantity)
        if (
            product.at_or_below_reorder_level
            and self._orders.search(product.id) is None
        ):
            order = Order(
                product_id=product.id,
                product_name=product.name,
                quantity_ordered=product.reorder_quantity,
            )
            self._orders.add_order(order)
            logger.info(
                "Stock of %s at %d (reorder level %d): ordered %d",
                product.id, product.stock, product.reorder_level,
                order.quantity_ordered,
            )
            return ResultCode.ORDER_PLACED
        return ResultCode.OPERATION_COMPLETED

    # --- Orders ---------------------------------------------------------------

    def create_order(
        self, product_id: str, quantity: int, product_name: str = ""
    ) -> Result:
        """Place an order by hand.

        Any outstanding order for the product blocks a new one, whether
        or not it matches the requested quantity.
        """
        product = self._catalog.search(product_id)
        if product is None:
            return Result(ResultCode.PRODUCT_NOT_FOUND)
        if self._orders.search(product_id) is not None:
            logger.debug("Rejected order for %s: one is already outstanding", product_id)
            return _FAILED
        try:
            qty = Quantity(quantity)
        except ValidationError as exc:
            logger.debug("Rejected order for %s: %s", product_id, exc)
            return _FAILED

        order = Order(
            product_id=product.id,
            product_name=product_name.strip() or product.name,
            quantity_ordered=qty.value,
        )
        if not self._orders.add_order(order):
            return _FAILED
        logger.info("Ordered %d of %s", qty.value, product.id)
        return Result(ResultCode.OPERATION_COMPLETED, order=order_fields(order))

    def process_shipment(self, product_id: str) -> Result:
        """Receive the shipment for a product's outstanding order.

        A second call for the same product fails because the order is
        gone, so stock is never credited twice.
        """
        order = self._orders.search(product_id)
        if order is None:
            return _FAILED
        product = self._catalog.search(order.product_id)
        if product is None:
            return Result(ResultCode.PRODUCT_NOT_FOUND)

        product.update_stock(order.quantity_ordered)
        self._orders.remove_order(order)
        logger.info(
            "Received %d of %s, stock now %d",
            order.quantity_ordered, product.id, product.stock,
        )
        return Result(
            ResultCode.OPERATION_COMPLETED,
            product=product_fields(product),
            order=order_fields(order),
        )

    # --- Members --------------------------------------------------------------

    def add_member(
        self,
        name: str,
        address: str,
        phone: str,
        fee: str | Decimal,
        date_joined: date | None = None,
    ) -> Result:
        try:
            member = Member.create(
                member_id=self._members.next_id(),
                name=name,
                address=address,
                phone=phone,
                date_joined=date_joined or date.today(),
                fee=Money.of(fee),
            )
        except ValidationError as exc:
            logger.debug("Rejected member '%s': %s", name, exc)
            return _FAILED

        if not self._members.add_member(member):
            return _FAILED
        logger.info("Enrolled member %s '%s'", member.id, member.name)
        return Result(ResultCode.OPERATION_COMPLETED, member=member_fields(member))

    def remove_member(self, member_id: str) -> Result:
        member = self._members.search(member_id)
        if member is None or not self._members.remove_member(member_id):
            return _FAILED
        if self._cart.member_id == member_id:
            self._cart.clear()
        logger.info("Removed member %s", member_id)
        return Result(ResultCode.OPERATION_COMPLETED, member=member_fields(member))

    def search_membership(self, name: str) -> Result:
        member = self._members.search_by_name(name)
        if member is None:
            return Result(ResultCode.NO_SUCH_MEMBER)
        return Result(ResultCode.OPERATION_COMPLETED, member=member_fields(member))

    def get_transactions_on_date(self, member_id: str, on: date) -> list[TransactionDTO]:
        """A member's purchases on one day. Unknown members have none."""
        member = self._members.search(member_id)
        if member is None:
            return []
        return [transaction_fields(t) for t in member.transactions_on(on)]

    # --- Enumeration ----------------------------------------------------------

    def get_products(self) -> SafeIterator[Product]:
        return SafeIterator(
            self._catalog,
            lambda p: Result(ResultCode.OPERATION_COMPLETED, product=product_fields(p)),
        )

    def get_members(self) -> SafeIterator[Member]:
        return SafeIterator(
            self._members,
            lambda m: Result(ResultCode.OPERATION_COMPLETED, member=member_fields(m)),
        )

    def get_orders(self) -> SafeIterator[Order]:
        return SafeIterator(
            self._orders,
            lambda o: Result(ResultCode.OPERATION_COMPLETED, order=order_fields(o)),
        )

    # --- Snapshot -------------------------------------------------------------

    def snapshot(self) -> StoreSnapshot:
        """Capture catalog, roster, orders and id sequences. The cart is left out."""
        return StoreSnapshot.capture(
            products=list(self._catalog),
            members=list(self._members),
            orders=list(self._orders),
            product_sequence=self._catalog.sequence,
            member_sequence=self._members.sequence,
        )

    @classmethod
    def from_snapshot(
        cls, snapshot: StoreSnapshot, *, allow_negative_stock: bool = False
    ) -> GroceryStore:
        return cls(
            catalog=Catalog(snapshot.copy_products(), snapshot.product_sequence),
            members=MemberList(snapshot.copy_members(), snapshot.member_sequence),
            orders=OutstandingOrderList(list(snapshot.orders)),
            allow_negative_stock=allow_negative_stock,
        )
