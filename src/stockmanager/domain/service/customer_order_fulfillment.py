"""Customer order fulfillment: ship and cancel shipment.

Customer lines are denominated in saleable units, so one unit of line
quantity moves exactly one unit of stock.
"""

from __future__ import annotations

from stockmanager.domain.model.customer_order import CustomerOrder
from stockmanager.domain.repository.unit_of_work import UnitOfWork
from stockmanager.domain.service.fulfillment_engine import (
    STOCK_IN,
    STOCK_OUT,
    FulfillmentEngine,
    FulfillmentStrategy,
)
from stockmanager.domain.service.locking import KeyedLocks, customer_order_key


class _CustomerOrderStrategy(FulfillmentStrategy):

    order_kind = "customer"

    def lock_key(self, order_id: int) -> str:
        return customer_order_key(order_id)

    def load(self, uow: UnitOfWork, order_id: int) -> CustomerOrder | None:
        return uow.customer_orders.get_by_id(order_id)

    def save(self, uow: UnitOfWork, order: CustomerOrder) -> None:
        uow.customer_orders.save(order)


class ShipCustomerOrder(_CustomerOrderStrategy):
    """UNSENT -> SENT, every line leaves the warehouse."""

    name = "Shipment"
    direction = STOCK_OUT

    def check(self, order: CustomerOrder) -> None:
        order.ensure_can_ship()

    def transition(self, order: CustomerOrder) -> None:
        order.mark_shipped()


class CancelCustomerShipment(_CustomerOrderStrategy):
    """SENT -> UNSENT, every line comes back into stock."""

    name = "Shipment cancellation"
    direction = STOCK_IN

    def check(self, order: CustomerOrder) -> None:
        order.ensure_can_cancel_shipment()

    def transition(self, order: CustomerOrder) -> None:
        order.mark_shipment_cancelled()


class CustomerOrderFulfillment:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._engine = FulfillmentEngine(uow, locks)

    def ship(self, order_id: int) -> CustomerOrder:
        """Mark the order as shipped and take each line out of stock.

        Raises UnknownOrderError, OrderStateError (already sent),
        EmptyOrderError or ProductStockError; nothing changes on failure.
        """
        return self._engine.run(ShipCustomerOrder(), order_id)

    def cancel_shipment(self, order_id: int) -> CustomerOrder:
        """Undo a shipment, putting each line back into stock."""
        return self._engine.run(CancelCustomerShipment(), order_id)
