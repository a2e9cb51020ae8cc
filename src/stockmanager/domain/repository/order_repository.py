"""Abstract repositories for the two order aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockmanager.domain.model.customer_order import CustomerOrder
from stockmanager.domain.model.supplier_order import SupplierOrder


class CustomerOrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique customer order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> CustomerOrder | None:
        """Return an order with its lines, or None if not found."""

    @abstractmethod
    def save(self, order: CustomerOrder) -> None:
        """Persist a new or updated order together with its lines."""


class SupplierOrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique supplier order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> SupplierOrder | None:
        """Return an order with its lines, or None if not found."""

    @abstractmethod
    def save(self, order: SupplierOrder) -> None:
        """Persist a new or updated order together with its lines."""
