"""CustomerOrder aggregate.

A customer order has exactly two states, tracked by ``is_sent``:

    UNSENT --ship--> SENT --cancel shipment--> UNSENT

The ``ensure_*`` guards are side-effect free so the fulfillment engine can
run them before computing any stock change; the ``mark_*`` transitions
re-check them and flip the flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from stockmanager.domain.exceptions import (
    EmptyOrderError,
    OrderStateError,
    ValidationError,
)
from stockmanager.domain.model.order_line import OrderLine, OrderLinesMixin


@dataclass
class CustomerOrder(OrderLinesMixin):

    id: int | None
    customer_id: str
    date: date
    delivery_date: date
    lines: list[OrderLine] = field(default_factory=list)
    is_sent: bool = False

    @staticmethod
    def create(customer_id: str, order_date: date, delivery_date: date) -> CustomerOrder:
        """Create a new, unsent customer order without lines."""
        if not customer_id:
            raise ValidationError("Customer is required")
        if delivery_date < order_date:
            raise ValidationError(
                f"Delivery date {delivery_date} is before order date {order_date}"
            )
        return CustomerOrder(
            id=None,
            customer_id=customer_id,
            date=order_date,
            delivery_date=delivery_date,
        )

    @property
    def lines_locked(self) -> bool:
        return self.is_sent

    # --- Guards ---------------------------------------------------------------

    def ensure_can_ship(self) -> None:
        if self.is_sent:
            raise OrderStateError(
                f"The customer order {self.id} is already sent", order_id=self.id
            )
        if not self.has_lines:
            raise EmptyOrderError(
                f"The customer order {self.id} must have at least one order line",
                order_id=self.id,
            )

    def ensure_can_cancel_shipment(self) -> None:
        if not self.is_sent:
            raise OrderStateError(
                f"The customer order {self.id} has not been sent", order_id=self.id
            )

    # --- State transitions ----------------------------------------------------

    def mark_shipped(self) -> None:
        self.ensure_can_ship()
        self.is_sent = True

    def mark_shipment_cancelled(self) -> None:
        self.ensure_can_cancel_shipment()
        self.is_sent = False
