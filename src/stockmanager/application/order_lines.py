"""Application services: add / remove order lines.

A line's price is snapshotted from the product when the line is added:
the sale price for customer orders, the purchase price for supplier
orders. Lines can only change while the order is unsent, and each
handler holds the order lock so a line cannot appear or vanish while a
fulfillment operation is running on the same order.

A customer line is refused when the product does not currently hold
enough stock for it; shipping re-checks stock in any case.
"""

from __future__ import annotations

from stockmanager.application.dto import (
    CustomerOrderDTO,
    SupplierOrderDTO,
    customer_order_to_dto,
    supplier_order_to_dto,
)
from stockmanager.domain.exceptions import (
    EntityNotFoundError,
    ProductStockError,
    UnknownOrderError,
)
from stockmanager.domain.model.product import Product
from stockmanager.domain.model.value_objects import Quantity
from stockmanager.domain.repository.unit_of_work import UnitOfWork
from stockmanager.domain.service.locking import (
    KeyedLocks,
    customer_order_key,
    default_locks,
    supplier_order_key,
)


def _get_product(uow: UnitOfWork, product_id: str) -> Product:
    product = uow.products.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(
            f"Product {product_id} was not found", product_ids=(product_id,)
        )
    return product


class AddCustomerOrderLineHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._uow = uow
        self._locks = locks if locks is not None else default_locks

    def handle(self, order_id: int, product_id: str, quantity: int) -> CustomerOrderDTO:
        with self._locks.hold(customer_order_key(order_id)), self._uow as uow:
            order = uow.customer_orders.get_by_id(order_id)
            if order is None:
                raise UnknownOrderError(
                    f"The customer order with id {order_id} was not found",
                    order_id=order_id,
                )
            product = _get_product(uow, product_id)
            line = order.add_line(product.id, Quantity(quantity), product.sale_price)
            if product.current_stock < line.quantity.value:
                raise ProductStockError(
                    f"Product {product.id} has {product.current_stock} unit(s) in stock, "
                    f"cannot order {line.quantity.value}",
                    order_id=order_id,
                    product_ids=(product.id,),
                )
            uow.customer_orders.save(order)
            uow.commit()
        return customer_order_to_dto(order)


class RemoveCustomerOrderLineHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._uow = uow
        self._locks = locks if locks is not None else default_locks

    def handle(self, order_id: int, product_id: str) -> CustomerOrderDTO:
        with self._locks.hold(customer_order_key(order_id)), self._uow as uow:
            order = uow.customer_orders.get_by_id(order_id)
            if order is None:
                raise UnknownOrderError(
                    f"The customer order with id {order_id} was not found",
                    order_id=order_id,
                )
            order.remove_line(product_id)
            uow.customer_orders.save(order)
            uow.commit()
        return customer_order_to_dto(order)


class AddSupplierOrderLineHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._uow = uow
        self._locks = locks if locks is not None else default_locks

    def handle(self, order_id: int, product_id: str, quantity: int) -> SupplierOrderDTO:
        """Add *quantity* batches of a product to a supplier order."""
        with self._locks.hold(supplier_order_key(order_id)), self._uow as uow:
            order = uow.supplier_orders.get_by_id(order_id)
            if order is None:
                raise UnknownOrderError(
                    f"The supplier order with id {order_id} was not found",
                    order_id=order_id,
                )
            product = _get_product(uow, product_id)
            order.add_line(product.id, Quantity(quantity), product.purchase_price)
            uow.supplier_orders.save(order)
            uow.commit()
        return supplier_order_to_dto(order)


class RemoveSupplierOrderLineHandler:

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._uow = uow
        self._locks = locks if locks is not None else default_locks

    def handle(self, order_id: int, product_id: str) -> SupplierOrderDTO:
        with self._locks.hold(supplier_order_key(order_id)), self._uow as uow:
            order = uow.supplier_orders.get_by_id(order_id)
            if order is None:
                raise UnknownOrderError(
                    f"The supplier order with id {order_id} was not found",
                    order_id=order_id,
                )
            order.remove_line(product_id)
            uow.supplier_orders.save(order)
            uow.commit()
        return supplier_order_to_dto(order)
