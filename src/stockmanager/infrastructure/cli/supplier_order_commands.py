"""CLI commands for the SupplierOrder aggregate."""

from __future__ import annotations

from datetime import date, datetime

import click

from stockmanager.application.create_order import CreateSupplierOrderHandler
from stockmanager.application.order_lines import (
    AddSupplierOrderLineHandler,
    RemoveSupplierOrderLineHandler,
)
from stockmanager.application.show_order import ShowSupplierOrderHandler
from stockmanager.application.supplier_order_fulfillment import (
    CancelReceiveSupplierOrderHandler,
    ReceiveSupplierOrderHandler,
    SendSupplierOrderHandler,
)
from stockmanager.domain.exceptions import DomainException
from stockmanager.infrastructure.bootstrap import unit_of_work
from stockmanager.infrastructure.cli.display import display_supplier_order
from stockmanager.infrastructure.cli.errors import from_exception, from_result_error

_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.command("create")
@click.option("--supplier", required=True, help="Supplier ID.")
@click.option("--date", "order_date", type=_DATE, default=None, help="Order date (default: today).")
@click.option("--delivery-date", type=_DATE, default=None, help="Delivery date (default: order date).")
@click.pass_obj
def supplier_order_create(
    data_dir: str | None,
    supplier: str,
    order_date: datetime | None,
    delivery_date: datetime | None,
) -> None:
    """Create a new, empty supplier order."""
    ordered = order_date.date() if order_date is not None else date.today()
    delivery = delivery_date.date() if delivery_date is not None else ordered
    handler = CreateSupplierOrderHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(supplier_id=supplier, order_date=ordered, delivery_date=delivery)
    except DomainException as exc:
        raise from_exception(exc)

    click.echo(f"Supplier order #{dto.id} created for {dto.supplier_id}")


@click.command("add-line")
@click.option("--id", "order_id", required=True, type=int, help="Supplier order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Batches ordered.")
@click.pass_obj
def supplier_order_add_line(data_dir: str | None, order_id: int, product_id: str, quantity: int) -> None:
    """Add a product line, counted in batches."""
    handler = AddSupplierOrderLineHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(order_id, product_id, quantity)
    except DomainException as exc:
        raise from_exception(exc)

    display_supplier_order(dto)


@click.command("remove-line")
@click.option("--id", "order_id", required=True, type=int, help="Supplier order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def supplier_order_remove_line(data_dir: str | None, order_id: int, product_id: str) -> None:
    """Remove a product line from an unsent order."""
    handler = RemoveSupplierOrderLineHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(order_id, product_id)
    except DomainException as exc:
        raise from_exception(exc)

    display_supplier_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Supplier order ID.")
@click.pass_obj
def supplier_order_show(data_dir: str | None, order_id: int) -> None:
    """Show a supplier order with its lines."""
    handler = ShowSupplierOrderHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise from_exception(exc)

    display_supplier_order(dto)


@click.command("send")
@click.option("--id", "order_id", required=True, type=int, help="Supplier order ID.")
@click.pass_obj
def supplier_order_send(data_dir: str | None, order_id: int) -> None:
    """Mark an order as sent to the supplier."""
    result = SendSupplierOrderHandler(unit_of_work(data_dir)).handle(order_id)
    if not result.ok:
        raise from_result_error(result.error)

    click.echo(f"Supplier order #{order_id} sent.")


@click.command("receive")
@click.option("--id", "order_id", required=True, type=int, help="Supplier order ID.")
@click.pass_obj
def supplier_order_receive(data_dir: str | None, order_id: int) -> None:
    """Receive a sent order (adds quantity x batch size to stock)."""
    result = ReceiveSupplierOrderHandler(unit_of_work(data_dir)).handle(order_id)
    if not result.ok:
        raise from_result_error(result.error)

    click.echo(f"Supplier order #{order_id} received — stock updated.")


@click.command("cancel-receive")
@click.option("--id", "order_id", required=True, type=int, help="Supplier order ID.")
@click.pass_obj
def supplier_order_cancel_receive(data_dir: str | None, order_id: int) -> None:
    """Cancel a reception (takes the received batches back out of stock)."""
    result = CancelReceiveSupplierOrderHandler(unit_of_work(data_dir)).handle(order_id)
    if not result.ok:
        raise from_result_error(result.error)

    click.echo(f"Supplier order #{order_id} reception cancelled — stock restored.")
