"""Application service: Show Order use cases (queries)."""

from __future__ import annotations

from stockmanager.application.dto import (
    CustomerOrderDTO,
    SupplierOrderDTO,
    customer_order_to_dto,
    supplier_order_to_dto,
)
from stockmanager.domain.exceptions import UnknownOrderError
from stockmanager.domain.repository.unit_of_work import UnitOfWork


class ShowCustomerOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> CustomerOrderDTO:
        with self._uow as uow:
            order = uow.customer_orders.get_by_id(order_id)
        if order is None:
            raise UnknownOrderError(
                f"The customer order with id {order_id} was not found",
                order_id=order_id,
            )
        return customer_order_to_dto(order)


class ShowSupplierOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> SupplierOrderDTO:
        with self._uow as uow:
            order = uow.supplier_orders.get_by_id(order_id)
        if order is None:
            raise UnknownOrderError(
                f"The supplier order with id {order_id} was not found",
                order_id=order_id,
            )
        return supplier_order_to_dto(order)
