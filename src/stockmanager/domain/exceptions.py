"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application layer can convert them uniformly into typed results and
the CLI can map each kind to its own exit status.

Infrastructure failures are deliberately *not* DomainExceptions: a
StorageError aborts the unit of work and propagates as-is.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    UNKNOWN_ORDER = "UNKNOWN_ORDER"
    ORDER_STATE = "ORDER_STATE"
    EMPTY_ORDER = "EMPTY_ORDER"
    PRODUCT_STOCK = "PRODUCT_STOCK"
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        order_id: int | None = None,
        product_ids: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.order_id = order_id
        self.product_ids = tuple(product_ids)

    @property
    def product_id(self) -> str | None:
        """The first offending product, if any."""
        return self.product_ids[0] if self.product_ids else None


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class UnknownOrderError(DomainException):
    """No order exists for the given id."""

    kind = ErrorKind.UNKNOWN_ORDER


class OrderStateError(DomainException):
    """Operation invoked from an illegal order state."""

    kind = ErrorKind.ORDER_STATE


class EmptyOrderError(DomainException):
    """Operation requires at least one order line and none exist."""

    kind = ErrorKind.EMPTY_ORDER


class ProductStockError(DomainException):
    """A stock invariant would be violated (stock would go negative)."""

    kind = ErrorKind.PRODUCT_STOCK


class StorageError(Exception):
    """The persistence layer failed; never a business outcome."""
