"""End-to-end tests of the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from stockmanager.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


def _catalog(run) -> None:
    assert run("product", "add", "--name", "Widget", "--sale-price", "15",
               "--purchase-price", "9", "--stock", "10", "--batch-size", "12").exit_code == 0
    assert run("product", "add", "--name", "Gadget", "--sale-price", "25",
               "--purchase-price", "14", "--stock", "2", "--batch-size", "6").exit_code == 0


class TestProductCommands:

    def test_add_and_list(self, run):
        _catalog(run)

        result = run("product", "list")

        assert result.exit_code == 0
        assert "Widget" in result.output
        assert "Gadget" in result.output

    def test_invalid_batch_size_exits_with_validation_code(self, run):
        result = run("product", "add", "--name", "X", "--sale-price", "1",
                     "--purchase-price", "1", "--batch-size", "1")

        assert result.exit_code == 1
        assert "batch size" in result.output


class TestCustomerOrderCommands:

    def test_ship_and_cancel(self, run):
        _catalog(run)
        assert run("customer-order", "create", "--customer", "C1",
                   "--date", "2024-01-01", "--delivery-date", "2024-01-03").exit_code == 0
        assert run("customer-order", "add-line", "--id", "1", "--product", "1",
                   "--quantity", "4").exit_code == 0

        shipped = run("customer-order", "ship", "--id", "1")
        assert shipped.exit_code == 0
        assert "shipped" in shipped.output
        assert "status=SENT" in run("customer-order", "show", "--id", "1").output

        again = run("customer-order", "ship", "--id", "1")
        assert again.exit_code == 4

        cancelled = run("customer-order", "cancel-ship", "--id", "1")
        assert cancelled.exit_code == 0
        assert "status=UNSENT" in run("customer-order", "show", "--id", "1").output

    def test_insufficient_stock_exit_code(self, run):
        _catalog(run)
        run("customer-order", "create", "--customer", "C1")
        run("customer-order", "add-line", "--id", "1", "--product", "1", "--quantity", "3")
        run("customer-order", "add-line", "--id", "1", "--product", "2", "--quantity", "2")
        run("customer-order", "create", "--customer", "C2")
        run("customer-order", "add-line", "--id", "2", "--product", "2", "--quantity", "2")
        assert run("customer-order", "ship", "--id", "2").exit_code == 0

        result = run("customer-order", "ship", "--id", "1")

        assert result.exit_code == 6
        assert "negative stock" in result.output

    def test_empty_order_exit_code(self, run):
        run("customer-order", "create", "--customer", "C1")
        assert run("customer-order", "ship", "--id", "1").exit_code == 5

    def test_unknown_order_exit_code(self, run):
        assert run("customer-order", "ship", "--id", "12").exit_code == 3
        assert run("customer-order", "show", "--id", "12").exit_code == 3


class TestSupplierOrderCommands:

    def test_full_lifecycle(self, run):
        _catalog(run)
        run("supplier-order", "create", "--supplier", "S1")

        assert run("supplier-order", "send", "--id", "1").exit_code == 4

        run("supplier-order", "add-line", "--id", "1", "--product", "2", "--quantity", "1")
        assert run("supplier-order", "send", "--id", "1").exit_code == 0
        assert run("supplier-order", "receive", "--id", "1").exit_code == 0
        assert "status=SENT, RECEIVED" in run("supplier-order", "show", "--id", "1").output

        run("customer-order", "create", "--customer", "C1")
        run("customer-order", "add-line", "--id", "1", "--product", "2", "--quantity", "5")
        assert run("customer-order", "ship", "--id", "1").exit_code == 0

        result = run("supplier-order", "cancel-receive", "--id", "1")
        assert result.exit_code == 6
