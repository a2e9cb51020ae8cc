"""Supplier order fulfillment: send, receive and cancel reception.

Supplier lines are denominated in batches: receiving a line adds
``quantity * product.batch_size`` units to stock, and cancelling the
reception takes the same amount back out.
"""

from __future__ import annotations

from stockmanager.domain.model.product import Product
from stockmanager.domain.model.supplier_order import SupplierOrder
from stockmanager.domain.repository.unit_of_work import UnitOfWork
from stockmanager.domain.service.fulfillment_engine import (
    NO_STOCK_MOVEMENT,
    STOCK_IN,
    STOCK_OUT,
    FulfillmentEngine,
    FulfillmentStrategy,
)
from stockmanager.domain.service.locking import KeyedLocks, supplier_order_key


class _SupplierOrderStrategy(FulfillmentStrategy):

    order_kind = "supplier"

    def lock_key(self, order_id: int) -> str:
        return supplier_order_key(order_id)

    def load(self, uow: UnitOfWork, order_id: int) -> SupplierOrder | None:
        return uow.supplier_orders.get_by_id(order_id)

    def save(self, uow: UnitOfWork, order: SupplierOrder) -> None:
        uow.supplier_orders.save(order)

    def units_per_line(self, product: Product) -> int:
        return product.batch_size


class SendSupplierOrder(_SupplierOrderStrategy):

    name = "Sending"
    direction = NO_STOCK_MOVEMENT

    def check(self, order: SupplierOrder) -> None:
        order.ensure_can_send()

    def transition(self, order: SupplierOrder) -> None:
        order.mark_sent()


class ReceiveSupplierOrder(_SupplierOrderStrategy):

    name = "Reception"
    direction = STOCK_IN

    def check(self, order: SupplierOrder) -> None:
        order.ensure_can_receive()

    def transition(self, order: SupplierOrder) -> None:
        order.mark_received()


class CancelSupplierReception(_SupplierOrderStrategy):

    name = "Reception cancellation"
    direction = STOCK_OUT

    def check(self, order: SupplierOrder) -> None:
        order.ensure_can_cancel_reception()

    def transition(self, order: SupplierOrder) -> None:
        order.mark_reception_cancelled()


class SupplierOrderFulfillment:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._engine = FulfillmentEngine(uow, locks)

    def send(self, order_id: int) -> SupplierOrder:
        """Mark the order as sent to the supplier. Stock is untouched."""
        return self._engine.run(SendSupplierOrder(), order_id)

    def receive(self, order_id: int) -> SupplierOrder:
        """Mark a sent order as received and add every batch to stock."""
        return self._engine.run(ReceiveSupplierOrder(), order_id)

    def cancel_reception(self, order_id: int) -> SupplierOrder:
        """Undo a reception; fails if any product would go negative."""
        return self._engine.run(CancelSupplierReception(), order_id)
