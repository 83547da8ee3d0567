"""End-to-end tests for the click command line, backed by a temp snapshot file."""

import logging
from datetime import date

import pytest
from click.testing import CliRunner

from grocery.infrastructure.cli.main import cli
from grocery.infrastructure.persistence.json_snapshot_repository import (
    JsonSnapshotRepository,
)


@pytest.fixture(autouse=True)
def _drop_cli_log_handler():
    yield
    root = logging.getLogger("grocery")
    for handler in list(root.handlers):
        if handler.get_name() == "grocery-cli":
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


def _run(data_file, *args):
    runner = CliRunner()
    return runner.invoke(cli, ["--data-file", str(data_file), *args])


def _seed(data_file):
    """Milk (P1) with 20 in stock, and member Ada (M1)."""
    assert _run(data_file, "product", "add", "--name", "Milk", "--price", "2.50",
                "--reorder-level", "10").exit_code == 0
    assert _run(data_file, "order", "create", "--product-id", "P1", "--quantity", "20").exit_code == 0
    assert _run(data_file, "order", "ship", "--product-id", "P1").exit_code == 0
    assert _run(data_file, "member", "add", "--name", "Ada", "--address", "1 Main St",
                "--phone", "555-0100", "--fee", "25", "--joined", "2026-01-05").exit_code == 0


class TestProductCommands:

    def test_add_and_list(self, tmp_path):
        data = tmp_path / "store.json"
        result = _run(data, "product", "add", "--name", "Milk", "--price", "2.50",
                      "--reorder-level", "10")
        assert result.exit_code == 0
        assert "Product P1 'Milk' added at $2.50" in result.output

        listing = _run(data, "product", "list")
        assert "Milk" in listing.output
        assert "$2.50" in listing.output

    def test_duplicate_name_fails(self, tmp_path):
        data = tmp_path / "store.json"
        _run(data, "product", "add", "--name", "Milk", "--price", "1", "--reorder-level", "1")
        result = _run(data, "product", "add", "--name", "Milk", "--price", "1", "--reorder-level", "1")
        assert result.exit_code == 1
        assert "could not add product 'Milk'" in result.output

    def test_price_and_info(self, tmp_path):
        data = tmp_path / "store.json"
        _run(data, "product", "add", "--name", "Milk", "--price", "2.50", "--reorder-level", "10")

        assert "now costs $2.75" in _run(data, "product", "price", "--id", "P1", "--price", "2.75").output
        assert "$2.75" in _run(data, "product", "info", "--name", "Milk").output
        assert "Milk" in _run(data, "product", "info", "--id", "P1").output

    def test_info_needs_exactly_one_key(self, tmp_path):
        result = _run(tmp_path / "store.json", "product", "info")
        assert result.exit_code == 2

    def test_info_unknown_product(self, tmp_path):
        result = _run(tmp_path / "store.json", "product", "info", "--id", "P7")
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestCheckoutCommand:

    def test_purchase_crossing_reorder_level(self, tmp_path):
        data = tmp_path / "store.json"
        _seed(data)

        result = _run(data, "checkout", "buy", "--member", "M1", "--items", "P1:15")

        assert result.exit_code == 0
        assert "$37.50" in result.output
        assert "Reorder placed for Milk" in result.output
        assert "P1" in _run(data, "order", "list").output

        store = JsonSnapshotRepository(data).load()
        assert store.retrieve_product_request("P1").product.stock == 5

    def test_failed_item_saves_nothing(self, tmp_path):
        data = tmp_path / "store.json"
        _seed(data)

        result = _run(data, "checkout", "buy", "--member", "M1", "--items", "P1:5,P1:50")

        assert result.exit_code == 1
        assert "could not sell 50 of 'P1'" in result.output
        store = JsonSnapshotRepository(data).load()
        assert store.retrieve_product_request("P1").product.stock == 20

    def test_negative_stock_flag(self, tmp_path):
        data = tmp_path / "store.json"
        _seed(data)

        result = _run(data, "--allow-negative-stock", "checkout", "buy",
                      "--member", "M1", "--items", "P1:25")

        assert result.exit_code == 0
        store = JsonSnapshotRepository(data).load()
        assert store.retrieve_product_request("P1").product.stock == -5

    def test_bad_item_format(self, tmp_path):
        data = tmp_path / "store.json"
        _seed(data)
        result = _run(data, "checkout", "buy", "--member", "M1", "--items", "P1-3")
        assert result.exit_code == 2

    def test_unknown_member(self, tmp_path):
        data = tmp_path / "store.json"
        _seed(data)
        result = _run(data, "checkout", "buy", "--member", "M9", "--items", "P1:1")
        assert result.exit_code == 1
        assert "No such member" in result.output


class TestMemberCommands:

    def test_search_list_and_remove(self, tmp_path):
        data = tmp_path / "store.json"
        _seed(data)

        assert "M1  Ada" in _run(data, "member", "search", "--name", "Ada").output
        assert "Ada" in _run(data, "member", "list").output
        assert _run(data, "member", "remove", "--id", "M1").exit_code == 0
        assert _run(data, "member", "search", "--name", "Ada").exit_code == 1
        assert _run(data, "member", "remove", "--id", "M1").exit_code == 1

    def test_transactions_for_today(self, tmp_path):
        data = tmp_path / "store.json"
        _seed(data)
        _run(data, "checkout", "buy", "--member", "M1", "--items", "P1:2")

        result = _run(data, "member", "transactions", "--id", "M1",
                      "--date", date.today().isoformat())
        assert "Milk" in result.output


class TestSettings:

    def test_data_file_from_environment(self, tmp_path):
        data = tmp_path / "env-store.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["product", "add", "--name", "Milk", "--price", "1", "--reorder-level", "1"],
            env={"GROCERY_DATA_FILE": str(data)},
        )
        assert result.exit_code == 0
        assert data.exists()

    def test_unreadable_data_file(self, tmp_path):
        data = tmp_path / "store.json"
        data.write_text("nope", encoding="utf-8")
        result = _run(data, "product", "list")
        assert result.exit_code == 1
        assert "Could not read store data" in result.output
