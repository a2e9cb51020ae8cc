from __future__ import annotations

import logging

import click

from stockmanager.infrastructure.bootstrap import DATA_DIR_ENV
from stockmanager.infrastructure.cli.customer_order_commands import (
    customer_order_add_line,
    customer_order_cancel_ship,
    customer_order_create,
    customer_order_remove_line,
    customer_order_ship,
    customer_order_show,
)
from stockmanager.infrastructure.cli.product_commands import product_add, product_list
from stockmanager.infrastructure.cli.supplier_order_commands import (
    supplier_order_add_line,
    supplier_order_cancel_receive,
    supplier_order_create,
    supplier_order_receive,
    supplier_order_remove_line,
    supplier_order_send,
    supplier_order_show,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding the stock store (default: ./data).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """Stock Manager — order fulfillment and stock reconciliation"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    ctx.obj = data_dir


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group("customer-order")
def customer_order() -> None:
    """Manage and ship customer orders."""


@cli.group("supplier-order")
def supplier_order() -> None:
    """Manage, send and receive supplier orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
customer_order.add_command(customer_order_create)
customer_order.add_command(customer_order_add_line)
customer_order.add_command(customer_order_remove_line)
customer_order.add_command(customer_order_show)
customer_order.add_command(customer_order_ship)
customer_order.add_command(customer_order_cancel_ship)
supplier_order.add_command(supplier_order_create)
supplier_order.add_command(supplier_order_add_line)
supplier_order.add_command(supplier_order_remove_line)
supplier_order.add_command(supplier_order_show)
supplier_order.add_command(supplier_order_send)
supplier_order.add_command(supplier_order_receive)
supplier_order.add_command(supplier_order_cancel_receive)
