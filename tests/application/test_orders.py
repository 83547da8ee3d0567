"""Tests for manual orders and shipment processing."""

from grocery.application.dto import ResultCode
from grocery.application.grocery_store import GroceryStore
from tests.builders import store_with_product


class TestProcessShipment:

    def test_credits_stock_and_closes_order(self):
        store, pid = store_with_product(stock=20, reorder_level=10)
        store.add_line_item(product_id=pid, quantity=15)

        result = store.process_shipment(pid)

        assert result.code == ResultCode.OPERATION_COMPLETED
        assert result.product.stock == 25
        assert result.order.quantity == 20
        assert list(store.get_orders()) == []

    def test_no_outstanding_order_fails_and_leaves_stock(self):
        store, pid = store_with_product(stock=7)
        result = store.process_shipment(pid)

        assert result.code == ResultCode.OPERATION_FAILED
        assert store.retrieve_product_request(pid).product.stock == 7

    def test_second_shipment_for_same_order_fails(self):
        store, pid = store_with_product(stock=20, reorder_level=10)
        store.add_line_item(product_id=pid, quantity=15)
        store.process_shipment(pid)

        result = store.process_shipment(pid)

        assert result.code == ResultCode.OPERATION_FAILED
        assert store.retrieve_product_request(pid).product.stock == 25

    def test_unknown_product(self):
        assert GroceryStore().process_shipment("P42").code == ResultCode.OPERATION_FAILED


class TestCreateOrder:

    def test_creates_order_with_catalog_name_by_default(self):
        store, pid = store_with_product()
        result = store.create_order(product_id=pid, quantity=12)

        assert result.code == ResultCode.OPERATION_COMPLETED
        assert (result.order.product_id, result.order.product_name, result.order.quantity) == (
            pid, "Milk", 12,
        )

    def test_uses_given_name(self):
        store, pid = store_with_product()
        result = store.create_order(product_id=pid, quantity=12, product_name="Whole milk")
        assert result.order.product_name == "Whole milk"

    def test_any_existing_order_blocks_a_new_one(self):
        store, pid = store_with_product()
        store.create_order(product_id=pid, quantity=12)

        same = store.create_order(product_id=pid, quantity=12)
        different = store.create_order(product_id=pid, quantity=30)

        assert same.code == ResultCode.OPERATION_FAILED
        assert different.code == ResultCode.OPERATION_FAILED
        assert [r.order.quantity for r in store.get_orders()] == [12]

    def test_manual_order_suppresses_automatic_reorder(self):
        store, pid = store_with_product(stock=20, reorder_level=10)
        store.create_order(product_id=pid, quantity=3)

        result = store.add_line_item(product_id=pid, quantity=15)

        assert result.code == ResultCode.OPERATION_COMPLETED
        assert [r.order.quantity for r in store.get_orders()] == [3]

    def test_unknown_product(self):
        result = GroceryStore().create_order(product_id="P9", quantity=5)
        assert result.code == ResultCode.PRODUCT_NOT_FOUND

    def test_invalid_quantity(self):
        store, pid = store_with_product()
        assert store.create_order(product_id=pid, quantity=0).code == ResultCode.OPERATION_FAILED
        assert list(store.get_orders()) == []
