"""Tests for store settings and the composition root."""

from pathlib import Path

from grocery.infrastructure.bootstrap import (
    StoreSettings,
    close_store,
    open_store,
)


class TestStoreSettings:

    def test_defaults(self):
        settings = StoreSettings.from_env({})
        assert settings.data_file.name == "grocery_store.json"
        assert settings.allow_negative_stock is False

    def test_environment_overrides(self):
        settings = StoreSettings.from_env({
            "GROCERY_DATA_FILE": "/tmp/elsewhere.json",
            "GROCERY_ALLOW_NEGATIVE_STOCK": "Yes",
        })
        assert settings.data_file == Path("/tmp/elsewhere.json")
        assert settings.allow_negative_stock is True

    def test_falsy_flag(self):
        assert StoreSettings.from_env({"GROCERY_ALLOW_NEGATIVE_STOCK": "0"}).allow_negative_stock is False


class TestOpenCloseStore:

    def test_first_run_starts_empty(self, tmp_path):
        store = open_store(StoreSettings(data_file=tmp_path / "s.json"))
        assert store is not None
        assert list(store.get_products()) == []

    def test_close_then_open_round_trips(self, tmp_path):
        settings = StoreSettings(data_file=tmp_path / "s.json", allow_negative_stock=True)
        store = open_store(settings)
        store.add_product(name="Milk", price="2.50", reorder_level=10)

        assert close_store(store, settings) is True
        reopened = open_store(settings)

        assert reopened.retrieve_product_info("Milk").product.id == "P1"
        assert reopened.allow_negative_stock is True

    def test_unreadable_snapshot_is_not_replaced_by_empty_store(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text("garbage", encoding="utf-8")
        assert open_store(StoreSettings(data_file=path)) is None
