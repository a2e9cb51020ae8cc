"""JSON-document-backed implementations of the order repositories.

Each order is stored with its lines embedded; lines only carry the
product id, never a copy of the product.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from stockmanager.domain.model.customer_order import CustomerOrder
from stockmanager.domain.model.order_line import OrderLine
from stockmanager.domain.model.supplier_order import SupplierOrder
from stockmanager.domain.model.value_objects import Money, Quantity
from stockmanager.domain.repository.order_repository import (
    CustomerOrderRepository,
    SupplierOrderRepository,
)
from stockmanager.infrastructure.persistence.records import decoding


def _lines_to_raw(lines: list[OrderLine]) -> list[dict]:
    return [
        {
            "product_id": line.product_id,
            "quantity": line.quantity.value,
            "unit_price": str(line.unit_price.amount),
            "currency": line.unit_price.currency,
        }
        for line in lines
    ]


def _lines_to_domain(order_id: int, raw_lines: list[dict]) -> list[OrderLine]:
    return [
        OrderLine(
            order_id=order_id,
            product_id=raw["product_id"],
            quantity=Quantity(raw["quantity"]),
            unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", "EUR")),
        )
        for raw in raw_lines
    ]


class _JsonOrderRecords:
    """Upsert / lookup helpers over one list of raw order records."""

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    def next_id(self) -> int:
        if not self._records:
            return 1
        return max(raw["id"] for raw in self._records) + 1

    def _find(self, order_id: int) -> dict | None:
        for raw in self._records:
            if raw["id"] == order_id:
                return raw
        return None

    def _upsert(self, record: dict) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == record["id"]:
                self._records[i] = record
                return
        self._records.append(record)


class JsonCustomerOrderRepository(_JsonOrderRecords, CustomerOrderRepository):

    def get_by_id(self, order_id: int) -> CustomerOrder | None:
        raw = self._find(order_id)
        if raw is None:
            return None
        with decoding("customer order", raw):
            return CustomerOrder(
                id=raw["id"],
                customer_id=raw["customer_id"],
                date=date.fromisoformat(raw["date"]),
                delivery_date=date.fromisoformat(raw["delivery_date"]),
                lines=_lines_to_domain(raw["id"], raw["lines"]),
                is_sent=raw["is_sent"],
            )

    def save(self, order: CustomerOrder) -> None:
        if order.id is None:
            order.id = self.next_id()
            order.bind_lines()
        self._upsert(
            {
                "id": order.id,
                "customer_id": order.customer_id,
                "date": order.date.isoformat(),
                "delivery_date": order.delivery_date.isoformat(),
                "is_sent": order.is_sent,
                "lines": _lines_to_raw(order.lines),
            }
        )


class JsonSupplierOrderRepository(_JsonOrderRecords, SupplierOrderRepository):

    def get_by_id(self, order_id: int) -> SupplierOrder | None:
        raw = self._find(order_id)
        if raw is None:
            return None
        with decoding("supplier order", raw):
            return SupplierOrder(
                id=raw["id"],
                supplier_id=raw["supplier_id"],
                date=date.fromisoformat(raw["date"]),
                delivery_date=date.fromisoformat(raw["delivery_date"]),
                lines=_lines_to_domain(raw["id"], raw["lines"]),
                order_is_sent=raw["order_is_sent"],
                is_received=raw["is_received"],
            )

    def save(self, order: SupplierOrder) -> None:
        if order.id is None:
            order.id = self.next_id()
            order.bind_lines()
        self._upsert(
            {
                "id": order.id,
                "supplier_id": order.supplier_id,
                "date": order.date.isoformat(),
                "delivery_date": order.delivery_date.isoformat(),
                "order_is_sent": order.order_is_sent,
                "is_received": order.is_received,
                "lines": _lines_to_raw(order.lines),
            }
        )
