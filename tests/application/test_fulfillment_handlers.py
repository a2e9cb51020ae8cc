"""Integration tests for the five fulfillment use cases.

Handlers never raise for business refusals: they return a
FulfillmentResult whose error kind tells the caller what went wrong.
"""

from datetime import date

import pytest

from stockmanager.application.add_product import AddProductHandler
from stockmanager.application.create_order import (
    CreateCustomerOrderHandler,
    CreateSupplierOrderHandler,
)
from stockmanager.application.customer_order_fulfillment import (
    CancelShipCustomerOrderHandler,
    ShipCustomerOrderHandler,
)
from stockmanager.application.order_lines import (
    AddCustomerOrderLineHandler,
    AddSupplierOrderLineHandler,
)
from stockmanager.application.supplier_order_fulfillment import (
    CancelReceiveSupplierOrderHandler,
    ReceiveSupplierOrderHandler,
    SendSupplierOrderHandler,
)
from stockmanager.domain.exceptions import StorageError
from tests.fakes import FakeStore, FakeUnitOfWork


def _setup():
    """Catalog: product 1 (stock 10, batch 12) and product 2 (stock 2, batch 6)."""
    store = FakeStore()
    uow = FakeUnitOfWork(store)
    add = AddProductHandler(uow)
    add.handle("Widget", "15.00", "8.00", stock=10, batch_size=12)
    add.handle("Gadget", "25.00", "14.00", stock=2, batch_size=6)
    return store, uow


def _customer_order(uow, *lines: tuple[str, int]) -> int:
    dto = CreateCustomerOrderHandler(uow).handle("C1", date(2024, 2, 1), date(2024, 2, 4))
    for product_id, qty in lines:
        AddCustomerOrderLineHandler(uow).handle(dto.id, product_id, qty)
    return dto.id


def _supplier_order(uow, *lines: tuple[str, int]) -> int:
    dto = CreateSupplierOrderHandler(uow).handle("S1", date(2024, 2, 1), date(2024, 2, 20))
    for product_id, qty in lines:
        AddSupplierOrderLineHandler(uow).handle(dto.id, product_id, qty)
    return dto.id


class TestShipCustomerOrder:

    def test_success_returns_updated_order(self):
        store, uow = _setup()
        order_id = _customer_order(uow, ("1", 4))

        result = ShipCustomerOrderHandler(uow).handle(order_id)

        assert result.ok
        assert result.order.is_sent is True
        assert result.order.lines[0].unit_price == "15.00 EUR"
        assert store.stock_of("1") == 6

    def test_insufficient_stock_scenario(self):
        store, uow = _setup()
        order_id = _customer_order(uow, ("1", 3), ("2", 2))
        # a competing order takes the last two gadgets first
        assert ShipCustomerOrderHandler(uow).handle(_customer_order(uow, ("2", 2))).ok

        result = ShipCustomerOrderHandler(uow).handle(order_id)

        assert not result.ok
        assert result.order is None
        assert result.error.kind == "PRODUCT_STOCK"
        assert result.error.product_ids == ("2",)
        assert result.error.order_id == order_id
        assert store.stock_of("1") == 10
        assert store.stock_of("2") == 0

    def test_empty_order(self):
        _, uow = _setup()
        order_id = _customer_order(uow)

        result = ShipCustomerOrderHandler(uow).handle(order_id)

        assert result.error.kind == "EMPTY_ORDER"

    def test_shipped_twice(self):
        store, uow = _setup()
        order_id = _customer_order(uow, ("1", 1))
        ShipCustomerOrderHandler(uow).handle(order_id)

        result = ShipCustomerOrderHandler(uow).handle(order_id)

        assert result.error.kind == "ORDER_STATE"
        assert store.stock_of("1") == 9

    def test_unknown_order(self):
        _, uow = _setup()

        result = ShipCustomerOrderHandler(uow).handle(404)

        assert result.error.kind == "UNKNOWN_ORDER"
        assert result.error.order_id == 404

    def test_storage_failure_is_raised_not_returned(self):
        store, uow = _setup()
        order_id = _customer_order(uow, ("1", 1))

        with pytest.raises(StorageError):
            ShipCustomerOrderHandler(FakeUnitOfWork(store, fail_on_commit=True)).handle(order_id)
        assert store.stock_of("1") == 10


class TestCancelShipCustomerOrder:

    def test_round_trip(self):
        store, uow = _setup()
        order_id = _customer_order(uow, ("1", 4), ("2", 2))
        ShipCustomerOrderHandler(uow).handle(order_id)

        result = CancelShipCustomerOrderHandler(uow).handle(order_id)

        assert result.ok
        assert result.order.is_sent is False
        assert store.stock_of("1") == 10
        assert store.stock_of("2") == 2

    def test_not_shipped(self):
        _, uow = _setup()
        order_id = _customer_order(uow, ("1", 4))

        result = CancelShipCustomerOrderHandler(uow).handle(order_id)

        assert result.error.kind == "ORDER_STATE"


class TestSupplierOrderLifecycle:

    def test_send_receive_cancel_receive(self):
        store, uow = _setup()
        order_id = _supplier_order(uow, ("1", 2), ("2", 1))

        sent = SendSupplierOrderHandler(uow).handle(order_id)
        assert sent.ok and sent.order.order_is_sent
        assert sent.order.lines[0].unit_price == "8.00 EUR"

        received = ReceiveSupplierOrderHandler(uow).handle(order_id)
        assert received.ok and received.order.is_received
        assert store.stock_of("1") == 10 + 2 * 12
        assert store.stock_of("2") == 2 + 6

        cancelled = CancelReceiveSupplierOrderHandler(uow).handle(order_id)
        assert cancelled.ok
        assert cancelled.order.is_received is False
        assert cancelled.order.order_is_sent is True
        assert store.stock_of("1") == 10
        assert store.stock_of("2") == 2

    def test_send_empty_order_is_state_error(self):
        _, uow = _setup()
        order_id = _supplier_order(uow)

        result = SendSupplierOrderHandler(uow).handle(order_id)

        assert result.error.kind == "ORDER_STATE"

    def test_receive_before_send(self):
        _, uow = _setup()
        order_id = _supplier_order(uow, ("1", 1))

        result = ReceiveSupplierOrderHandler(uow).handle(order_id)

        assert result.error.kind == "ORDER_STATE"

    def test_cancel_receive_after_stock_was_sold(self):
        store, uow = _setup()
        supplier_order = _supplier_order(uow, ("2", 1))
        SendSupplierOrderHandler(uow).handle(supplier_order)
        ReceiveSupplierOrderHandler(uow).handle(supplier_order)
        # 8 in stock, sell 5 of them
        ShipCustomerOrderHandler(uow).handle(_customer_order(uow, ("2", 5)))

        result = CancelReceiveSupplierOrderHandler(uow).handle(supplier_order)

        assert result.error.kind == "PRODUCT_STOCK"
        assert result.error.product_ids == ("2",)
        assert store.stock_of("2") == 3
        assert store.supplier_orders[supplier_order].is_received is True

    def test_unknown_supplier_order(self):
        _, uow = _setup()

        for handler in (
            SendSupplierOrderHandler(uow),
            ReceiveSupplierOrderHandler(uow),
            CancelReceiveSupplierOrderHandler(uow),
        ):
            assert handler.handle(77).error.kind == "UNKNOWN_ORDER"
