"""Tests for catalog operations on the store facade."""

from grocery.application.dto import ResultCode
from grocery.application.grocery_store import GroceryStore


class TestAddProduct:

    def test_assigns_sequential_ids_and_zero_stock(self):
        store = GroceryStore()
        first = store.add_product(name="Milk", price="2.50", reorder_level=10)
        second = store.add_product(name="Bread", price="3.00", reorder_level=5)

        assert first.code == ResultCode.OPERATION_COMPLETED
        assert (first.product.id, second.product.id) == ("P1", "P2")
        assert first.product.stock == 0
        assert first.product.price == "$2.50"
        assert first.product.reorder_level == 10

    def test_catalog_contains_exactly_the_added_products(self):
        store = GroceryStore()
        for name in ("Milk", "Bread", "Eggs"):
            store.add_product(name=name, price="1", reorder_level=1)
        assert [r.product.name for r in store.get_products()] == ["Milk", "Bread", "Eggs"]

    def test_duplicate_name_rejected_and_catalog_unchanged(self):
        store = GroceryStore()
        store.add_product(name="Milk", price="2.50", reorder_level=10)

        result = store.add_product(name="Milk", price="9.99", reorder_level=1)

        assert result.code == ResultCode.OPERATION_FAILED
        [only] = [r.product for r in store.get_products()]
        assert (only.price, only.reorder_level) == ("$2.50", 10)

    def test_invalid_input_rejected(self):
        store = GroceryStore()
        assert store.add_product(name="", price="1", reorder_level=1).code == ResultCode.OPERATION_FAILED
        assert store.add_product(name="Milk", price="-1", reorder_level=1).code == ResultCode.OPERATION_FAILED
        assert store.add_product(name="Milk", price="abc", reorder_level=1).code == ResultCode.OPERATION_FAILED
        assert store.add_product(name="Milk", price="1", reorder_level=-3).code == ResultCode.OPERATION_FAILED
        assert list(store.get_products()) == []


class TestChangePrice:

    def test_updates_price(self):
        store = GroceryStore()
        pid = store.add_product(name="Milk", price="2.50", reorder_level=10).product.id

        result = store.change_price(product_id=pid, price="2.75")

        assert result.code == ResultCode.OPERATION_COMPLETED
        assert result.product.price == "$2.75"
        assert store.retrieve_product_request(pid).product.price == "$2.75"

    def test_unknown_product(self):
        assert GroceryStore().change_price(product_id="P1", price="1").code == ResultCode.OPERATION_FAILED

    def test_invalid_price_keeps_old_one(self):
        store = GroceryStore()
        pid = store.add_product(name="Milk", price="2.50", reorder_level=10).product.id
        assert store.change_price(product_id=pid, price="-2").code == ResultCode.OPERATION_FAILED
        assert store.retrieve_product_request(pid).product.price == "$2.50"


class TestRetrieveProduct:

    def test_by_name(self):
        store = GroceryStore()
        store.add_product(name="Milk", price="2.50", reorder_level=10)
        result = store.retrieve_product_info("Milk")
        assert result.code == ResultCode.OPERATION_COMPLETED
        assert result.product.id == "P1"

    def test_by_name_not_found(self):
        store = GroceryStore()
        store.add_product(name="Milk", price="2.50", reorder_level=10)
        assert store.retrieve_product_info("Cheese").code == ResultCode.PRODUCT_NOT_FOUND

    def test_by_id(self):
        store = GroceryStore()
        store.add_product(name="Milk", price="2.50", reorder_level=10)
        assert store.retrieve_product_request("P1").product.name == "Milk"
        assert store.retrieve_product_request("P2").code == ResultCode.PRODUCT_NOT_FOUND
