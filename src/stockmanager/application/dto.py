"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without exposing
domain internals. FulfillmentResult is the tagged outcome of every
fulfillment operation: either the updated order or a typed error.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stockmanager.domain.exceptions import DomainException
from stockmanager.domain.model.customer_order import CustomerOrder
from stockmanager.domain.model.order_line import OrderLine
from stockmanager.domain.model.product import Product
from stockmanager.domain.model.supplier_order import SupplierOrder


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    sale_price: str
    purchase_price: str
    stock: int | None
    min_stock: int
    batch_size: int


@dataclass(frozen=True)
class OrderLineDTO:

    product_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "15.00 EUR"
    line_total: str


@dataclass(frozen=True)
class CustomerOrderDTO:

    id: int
    customer_id: str
    date: str
    delivery_date: str
    is_sent: bool
    lines: list[OrderLineDTO]
    total: str


@dataclass(frozen=True)
class SupplierOrderDTO:

    id: int
    supplier_id: str
    date: str
    delivery_date: str
    order_is_sent: bool
    is_received: bool
    lines: list[OrderLineDTO]
    total: str


@dataclass(frozen=True)
class FulfillmentError:
    """Why a fulfillment operation was refused."""

    kind: str
    message: str
    order_id: int | None = None
    product_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FulfillmentResult:

    order: CustomerOrderDTO | SupplierOrderDTO | None = None
    error: FulfillmentError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(order: CustomerOrderDTO | SupplierOrderDTO) -> FulfillmentResult:
        return FulfillmentResult(order=order)

    @staticmethod
    def failure(exc: DomainException) -> FulfillmentResult:
        return FulfillmentResult(
            error=FulfillmentError(
                kind=exc.kind.value,
                message=exc.message,
                order_id=exc.order_id,
                product_ids=exc.product_ids,
            )
        )


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        sale_price=str(product.sale_price),
        purchase_price=str(product.purchase_price),
        stock=product.stock,
        min_stock=product.min_stock,
        batch_size=product.batch_size,
    )


def _lines_to_dto(lines: list[OrderLine]) -> list[OrderLineDTO]:
    return [
        OrderLineDTO(
            product_id=line.product_id,
            quantity=line.quantity.value,
            unit_price=str(line.unit_price),
            line_total=str(line.line_total),
        )
        for line in lines
    ]


def customer_order_to_dto(order: CustomerOrder) -> CustomerOrderDTO:
    return CustomerOrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        date=order.date.isoformat(),
        delivery_date=order.delivery_date.isoformat(),
        is_sent=order.is_sent,
        lines=_lines_to_dto(order.lines),
        total=str(order.total),
    )


def supplier_order_to_dto(order: SupplierOrder) -> SupplierOrderDTO:
    return SupplierOrderDTO(
        id=order.id,  # type: ignore[arg-type]
        supplier_id=order.supplier_id,
        date=order.date.isoformat(),
        delivery_date=order.delivery_date.isoformat(),
        order_is_sent=order.order_is_sent,
        is_received=order.is_received,
        lines=_lines_to_dto(order.lines),
        total=str(order.total),
    )
