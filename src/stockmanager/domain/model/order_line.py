"""Order lines and the line-maintenance rules shared by both order types.

A line is identified by (order id, product id) and references both by
plain id. The price is a snapshot taken when the line is created and is
never re-read from the product.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockmanager.domain.exceptions import (
    EntityNotFoundError,
    OrderStateError,
    ValidationError,
)
from stockmanager.domain.model.value_objects import Money, Quantity


@dataclass
class OrderLine:

    order_id: int | None
    product_id: str
    quantity: Quantity
    unit_price: Money  # locked at line-creation time

    @property
    def key(self) -> tuple[int | None, str]:
        return self.order_id, self.product_id

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


class OrderLinesMixin:
    """Line bookkeeping for an order aggregate.

    Host classes provide ``id``, ``lines`` and ``lines_locked``.
    """

    id: int | None
    lines: list[OrderLine]

    @property
    def lines_locked(self) -> bool:
        raise NotImplementedError

    @property
    def has_lines(self) -> bool:
        return len(self.lines) > 0

    def add_line(self, product_id: str, quantity: Quantity, unit_price: Money) -> OrderLine:
        if self.lines_locked:
            raise OrderStateError(
                f"Order #{self.id} is already sent, its lines cannot change",
                order_id=self.id,
            )
        if self.find_line(product_id) is not None:
            raise ValidationError(
                f"Order #{self.id} already has a line for product '{product_id}'",
                order_id=self.id,
                product_ids=(product_id,),
            )
        line = OrderLine(
            order_id=self.id,
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
        )
        self.lines.append(line)
        return line

    def remove_line(self, product_id: str) -> None:
        if self.lines_locked:
            raise OrderStateError(
                f"Order #{self.id} is already sent, its lines cannot change",
                order_id=self.id,
            )
        line = self.find_line(product_id)
        if line is None:
            raise EntityNotFoundError(
                f"Order #{self.id} has no line for product '{product_id}'",
                order_id=self.id,
                product_ids=(product_id,),
            )
        self.lines.remove(line)

    def find_line(self, product_id: str) -> OrderLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def bind_lines(self) -> None:
        """Stamp the (possibly freshly assigned) order id onto every line."""
        for line in self.lines:
            line.order_id = self.id

    @property
    def total(self) -> Money:
        if not self.lines:
            return Money.of("0")
        result = self.lines[0].line_total
        for line in self.lines[1:]:
            result = result + line.line_total
        return result
