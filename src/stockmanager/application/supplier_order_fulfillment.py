"""Application services: Send / Receive / Cancel Reception of a supplier order."""

from __future__ import annotations

from stockmanager.application.dto import FulfillmentResult, supplier_order_to_dto
from stockmanager.domain.exceptions import DomainException
from stockmanager.domain.repository.unit_of_work import UnitOfWork
from stockmanager.domain.service.locking import KeyedLocks
from stockmanager.domain.service.supplier_order_fulfillment import (
    SupplierOrderFulfillment,
)


class SendSupplierOrderHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._fulfillment = SupplierOrderFulfillment(uow, locks)

    def handle(self, order_id: int) -> FulfillmentResult:
        try:
            order = self._fulfillment.send(order_id)
        except DomainException as exc:
            return FulfillmentResult.failure(exc)
        return FulfillmentResult.success(supplier_order_to_dto(order))


class ReceiveSupplierOrderHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._fulfillment = SupplierOrderFulfillment(uow, locks)

    def handle(self, order_id: int) -> FulfillmentResult:
        try:
            order = self._fulfillment.receive(order_id)
        except DomainException as exc:
            return FulfillmentResult.failure(exc)
        return FulfillmentResult.success(supplier_order_to_dto(order))


class CancelReceiveSupplierOrderHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._fulfillment = SupplierOrderFulfillment(uow, locks)

    def handle(self, order_id: int) -> FulfillmentResult:
        try:
            order = self._fulfillment.cancel_reception(order_id)
        except DomainException as exc:
            return FulfillmentResult.failure(exc)
        return FulfillmentResult.success(supplier_order_to_dto(order))
