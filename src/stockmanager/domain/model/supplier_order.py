"""SupplierOrder aggregate.

Two independent flags:

    {unsent, not received} --send--> {sent, not received}
        --receive--> {sent, received}
        --cancel reception--> {sent, not received}

``order_is_sent`` only ever goes false -> true.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from stockmanager.domain.exceptions import (
    OrderStateError,
    ProductStockError,
    ValidationError,
)
from stockmanager.domain.model.order_line import OrderLine, OrderLinesMixin


@dataclass
class SupplierOrder(OrderLinesMixin):

    id: int | None
    supplier_id: str
    date: date
    delivery_date: date
    lines: list[OrderLine] = field(default_factory=list)
    order_is_sent: bool = False
    is_received: bool = False

    @staticmethod
    def create(supplier_id: str, order_date: date, delivery_date: date) -> SupplierOrder:
        """Create a new supplier order: not sent, not received, no lines."""
        if not supplier_id:
            raise ValidationError("Supplier is required")
        if delivery_date < order_date:
            raise ValidationError(
                f"Delivery date {delivery_date} is before order date {order_date}"
            )
        return SupplierOrder(
            id=None,
            supplier_id=supplier_id,
            date=order_date,
            delivery_date=delivery_date,
        )

    @property
    def lines_locked(self) -> bool:
        return self.order_is_sent

    # --- Guards ---------------------------------------------------------------

    def ensure_can_send(self) -> None:
        if self.order_is_sent:
            raise OrderStateError(
                f"The supplier order {self.id} is already sent", order_id=self.id
            )
        if not self.has_lines:
            raise OrderStateError(
                f"The supplier order {self.id} has no order lines", order_id=self.id
            )

    def ensure_can_receive(self) -> None:
        if self.is_received:
            raise OrderStateError(
                f"The supplier order {self.id} is already received", order_id=self.id
            )
        if not self.order_is_sent:
            raise OrderStateError(
                f"The supplier order {self.id} has not been sent", order_id=self.id
            )
        if not self.has_lines:
            raise ProductStockError(
                f"The supplier order {self.id} must have at least one order line",
                order_id=self.id,
            )

    def ensure_can_cancel_reception(self) -> None:
        if not self.is_received:
            raise OrderStateError(
                f"The supplier order {self.id} is not received", order_id=self.id
            )

    # --- State transitions ----------------------------------------------------

    def mark_sent(self) -> None:
        self.ensure_can_send()
        self.order_is_sent = True

    def mark_received(self) -> None:
        self.ensure_can_receive()
        self.is_received = True

    def mark_reception_cancelled(self) -> None:
        self.ensure_can_cancel_reception()
        self.is_received = False
