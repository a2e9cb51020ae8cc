"""Unit of Work: the transactional envelope around one operation.

Every repository reached through a unit of work shares one transaction.
Nothing saved through them becomes visible outside until ``commit()``;
leaving the ``with`` block without committing rolls everything back,
including when an exception escapes.

    with uow:
        order = uow.customer_orders.get_by_id(1)
        ...
        uow.commit()
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockmanager.domain.repository.order_repository import (
    CustomerOrderRepository,
    SupplierOrderRepository,
)
from stockmanager.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    customer_orders: CustomerOrderRepository
    supplier_orders: SupplierOrderRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # rollback after a successful commit is a no-op
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every write of this transaction durable, all at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted write."""
