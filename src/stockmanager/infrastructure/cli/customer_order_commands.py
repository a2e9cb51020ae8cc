"""CLI commands for the CustomerOrder aggregate."""

from __future__ import annotations

from datetime import date, datetime

import click

from stockmanager.application.create_order import CreateCustomerOrderHandler
from stockmanager.application.customer_order_fulfillment import (
    CancelShipCustomerOrderHandler,
    ShipCustomerOrderHandler,
)
from stockmanager.application.order_lines import (
    AddCustomerOrderLineHandler,
    RemoveCustomerOrderLineHandler,
)
from stockmanager.application.show_order import ShowCustomerOrderHandler
from stockmanager.domain.exceptions import DomainException
from stockmanager.infrastructure.bootstrap import unit_of_work
from stockmanager.infrastructure.cli.display import display_customer_order
from stockmanager.infrastructure.cli.errors import from_exception, from_result_error

_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.command("create")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--date", "order_date", type=_DATE, default=None, help="Order date (default: today).")
@click.option("--delivery-date", type=_DATE, default=None, help="Delivery date (default: order date).")
@click.pass_obj
def customer_order_create(
    data_dir: str | None,
    customer: str,
    order_date: datetime | None,
    delivery_date: datetime | None,
) -> None:
    """Create a new, empty customer order."""
    ordered = order_date.date() if order_date is not None else date.today()
    delivery = delivery_date.date() if delivery_date is not None else ordered
    handler = CreateCustomerOrderHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(customer_id=customer, order_date=ordered, delivery_date=delivery)
    except DomainException as exc:
        raise from_exception(exc)

    click.echo(f"Customer order #{dto.id} created for {dto.customer_id}")


@click.command("add-line")
@click.option("--id", "order_id", required=True, type=int, help="Customer order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units ordered.")
@click.pass_obj
def customer_order_add_line(data_dir: str | None, order_id: int, product_id: str, quantity: int) -> None:
    """Add a product line (price snapshot taken now)."""
    handler = AddCustomerOrderLineHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(order_id, product_id, quantity)
    except DomainException as exc:
        raise from_exception(exc)

    display_customer_order(dto)


@click.command("remove-line")
@click.option("--id", "order_id", required=True, type=int, help="Customer order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def customer_order_remove_line(data_dir: str | None, order_id: int, product_id: str) -> None:
    """Remove a product line from an unsent order."""
    handler = RemoveCustomerOrderLineHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(order_id, product_id)
    except DomainException as exc:
        raise from_exception(exc)

    display_customer_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Customer order ID.")
@click.pass_obj
def customer_order_show(data_dir: str | None, order_id: int) -> None:
    """Show a customer order with its lines."""
    handler = ShowCustomerOrderHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise from_exception(exc)

    display_customer_order(dto)


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int, help="Customer order ID.")
@click.pass_obj
def customer_order_ship(data_dir: str | None, order_id: int) -> None:
    """Ship an order (takes every line out of stock)."""
    result = ShipCustomerOrderHandler(unit_of_work(data_dir)).handle(order_id)
    if not result.ok:
        raise from_result_error(result.error)

    click.echo(f"Customer order #{order_id} shipped — stock updated.")


@click.command("cancel-ship")
@click.option("--id", "order_id", required=True, type=int, help="Customer order ID.")
@click.pass_obj
def customer_order_cancel_ship(data_dir: str | None, order_id: int) -> None:
    """Cancel a shipment (puts every line back into stock)."""
    result = CancelShipCustomerOrderHandler(unit_of_work(data_dir)).handle(order_id)
    if not result.ok:
        raise from_result_error(result.error)

    click.echo(f"Customer order #{order_id} shipment cancelled — stock restored.")
