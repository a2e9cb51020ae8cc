"""Domain service: state-gated batch stock adjustment.

Every fulfillment operation follows the same algorithm:

  1. Lock the order, open a unit of work, load the order with its lines
     (``UnknownOrderError`` if absent).
  2. Run the operation's guard. Guards raise before any stock is looked
     at, so a wrong state or an empty order is side-effect free.
  3. Lock every product the lines reference, then stage one stock delta
     per line in a StockLedger: ``direction * quantity * units_per_line``.
     Every line is checked; all offending products are reported together
     in one ProductStockError, so the outcome does not depend on the
     order in which lines are visited.
  4. Only when every delta is valid: flip the order flag, save the staged
     products and the order, and commit the unit of work.

What varies per operation (order type, direction of the stock flow, unit
multiplier, guard, transition) is supplied by a FulfillmentStrategy.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from stockmanager.domain.exceptions import ProductStockError, UnknownOrderError
from stockmanager.domain.model.product import Product
from stockmanager.domain.repository.unit_of_work import UnitOfWork
from stockmanager.domain.service.locking import KeyedLocks, default_locks, product_key
from stockmanager.domain.service.stock_ledger import StockLedger

logger = logging.getLogger(__name__)

STOCK_IN = 1
STOCK_OUT = -1
NO_STOCK_MOVEMENT = 0


class FulfillmentStrategy(ABC):
    """One fulfillment operation on one kind of order."""

    #: human-readable operation name, used in logs and messages
    name: str = ""
    #: STOCK_IN, STOCK_OUT or NO_STOCK_MOVEMENT
    direction: int = NO_STOCK_MOVEMENT
    #: "customer" or "supplier", used in messages
    order_kind: str = ""

    @abstractmethod
    def lock_key(self, order_id: int) -> str:
        """Lock key of the order aggregate."""

    @abstractmethod
    def load(self, uow: UnitOfWork, order_id: int) -> Any:
        """Load the order with its lines, or None."""

    @abstractmethod
    def save(self, uow: UnitOfWork, order: Any) -> None:
        """Stage the updated order in the unit of work."""

    @abstractmethod
    def check(self, order: Any) -> None:
        """Raise a DomainException if the operation is illegal right now."""

    @abstractmethod
    def transition(self, order: Any) -> None:
        """Flip the order flag."""

    def units_per_line(self, product: Product) -> int:
        """Stock units represented by one unit of line quantity."""
        return 1

    def stock_delta(self, quantity: int, product: Product) -> int:
        return self.direction * quantity * self.units_per_line(product)


class FulfillmentEngine:
    """Runs a FulfillmentStrategy against one order, all or nothing."""

    def __init__(self, uow: UnitOfWork, locks: KeyedLocks | None = None) -> None:
        self._uow = uow
        self._locks = locks if locks is not None else default_locks

    def run(self, strategy: FulfillmentStrategy, order_id: int) -> Any:
        logger.debug("%s of the %s order %s", strategy.name, strategy.order_kind, order_id)

        with self._locks.hold(strategy.lock_key(order_id)), self._uow as uow:
            order = strategy.load(uow, order_id)
            if order is None:
                logger.debug("The %s order %s was not found", strategy.order_kind, order_id)
                raise UnknownOrderError(
                    f"The {strategy.order_kind} order with id {order_id} was not found",
                    order_id=order_id,
                )

            strategy.check(order)

            product_ids = [line.product_id for line in order.lines]
            with self._locks.hold(*(product_key(pid) for pid in product_ids)):
                ledger = StockLedger(uow.products)
                if strategy.direction != NO_STOCK_MOVEMENT:
                    self._stage_lines(strategy, ledger, order)

                strategy.transition(order)
                ledger.commit()
                strategy.save(uow, order)
                uow.commit()

        logger.info("%s of the %s order %s committed", strategy.name, strategy.order_kind, order_id)
        return order

    @staticmethod
    def _stage_lines(strategy: FulfillmentStrategy, ledger: StockLedger, order: Any) -> None:
        offenders: list[str] = []
        for line in order.lines:
            try:
                product = ledger.current(line.product_id)
                ledger.adjust(
                    line.product_id,
                    strategy.stock_delta(line.quantity.value, product),
                )
            except ProductStockError as exc:
                offenders.extend(exc.product_ids)

        if offenders:
            ledger.discard()
            listed = ", ".join(offenders)
            logger.info(
                "%s of the %s order %s aborted, insufficient stock for: %s",
                strategy.name, strategy.order_kind, order.id, listed,
            )
            raise ProductStockError(
                f"{strategy.name} of the {strategy.order_kind} order {order.id} "
                f"would leave negative stock for product(s): {listed}",
                order_id=order.id,
                product_ids=tuple(offenders),
            )
