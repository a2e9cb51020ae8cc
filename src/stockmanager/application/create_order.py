"""Application service: Create Order use cases.

New orders start with every flag false and no lines; lines are added
afterwards with the order-line handlers.
"""

from __future__ import annotations

from datetime import date

from stockmanager.application.dto import (
    CustomerOrderDTO,
    SupplierOrderDTO,
    customer_order_to_dto,
    supplier_order_to_dto,
)
from stockmanager.domain.model.customer_order import CustomerOrder
from stockmanager.domain.model.supplier_order import SupplierOrder
from stockmanager.domain.repository.unit_of_work import UnitOfWork


class CreateCustomerOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self, customer_id: str, order_date: date, delivery_date: date
    ) -> CustomerOrderDTO:
        order = CustomerOrder.create(customer_id, order_date, delivery_date)
        with self._uow as uow:
            uow.customer_orders.save(order)  # assigns the id
            uow.commit()
        return customer_order_to_dto(order)


class CreateSupplierOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self, supplier_id: str, order_date: date, delivery_date: date
    ) -> SupplierOrderDTO:
        order = SupplierOrder.create(supplier_id, order_date, delivery_date)
        with self._uow as uow:
            uow.supplier_orders.save(order)  # assigns the id
            uow.commit()
        return supplier_order_to_dto(order)
