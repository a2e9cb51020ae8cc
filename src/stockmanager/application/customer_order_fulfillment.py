"""Application services: Ship / Cancel Shipment of a customer order.

Domain refusals (unknown order, wrong state, empty order, insufficient
stock) come back as a failed FulfillmentResult. Storage failures are not
business outcomes and propagate unchanged.
"""

from __future__ import annotations

from stockmanager.application.dto import FulfillmentResult, customer_order_to_dto
from stockmanager.domain.exceptions import DomainException
from stockmanager.domain.repository.unit_of_work import UnitOfWork
from stockmanager.domain.service.customer_order_fulfillment import (
    CustomerOrderFulfillment,
)
from stockmanager.domain.service.locking import KeyedLocks


class ShipCustomerOrderHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._fulfillment = CustomerOrderFulfillment(uow, locks)

    def handle(self, order_id: int) -> FulfillmentResult:
        try:
            order = self._fulfillment.ship(order_id)
        except DomainException as exc:
            return FulfillmentResult.failure(exc)
        return FulfillmentResult.success(customer_order_to_dto(order))


class CancelShipCustomerOrderHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._fulfillment = CustomerOrderFulfillment(uow, locks)

    def handle(self, order_id: int) -> FulfillmentResult:
        try:
            order = self._fulfillment.cancel_shipment(order_id)
        except DomainException as exc:
            return FulfillmentResult.failure(exc)
        return FulfillmentResult.success(customer_order_to_dto(order))
