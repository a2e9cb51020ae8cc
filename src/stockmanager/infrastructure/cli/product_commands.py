"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from stockmanager.application.add_product import AddProductHandler, ListProductsHandler
from stockmanager.domain.exceptions import DomainException
from stockmanager.infrastructure.bootstrap import unit_of_work
from stockmanager.infrastructure.cli.errors import from_exception


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sale-price", required=True, help="Sale price (e.g. 15.00).")
@click.option("--purchase-price", required=True, help="Purchase price (e.g. 9.50).")
@click.option("--stock", type=int, default=0, show_default=True, help="Units in stock.")
@click.option("--untracked", is_flag=True, default=False, help="No stock kept, never reordered.")
@click.option("--min-stock", type=int, default=0, show_default=True, help="Reorder threshold.")
@click.option("--batch-size", type=int, default=2, show_default=True, help="Units per supplier batch.")
@click.pass_obj
def product_add(
    data_dir: str | None,
    name: str,
    sale_price: str,
    purchase_price: str,
    stock: int,
    untracked: bool,
    min_stock: int,
    batch_size: int,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work(data_dir))

    try:
        dto = handler.handle(
            name=name,
            sale_price=sale_price,
            purchase_price=purchase_price,
            stock=None if untracked else stock,
            min_stock=min_stock,
            batch_size=batch_size,
        )
    except DomainException as exc:
        raise from_exception(exc)

    click.echo(f"Product #{dto.id} '{dto.name}' added (stock={dto.stock}, batch={dto.batch_size})")


@click.command("list")
@click.pass_obj
def product_list(data_dir: str | None) -> None:
    """List all products with their stock."""
    products = ListProductsHandler(unit_of_work(data_dir)).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Sale':>12} {'Purchase':>12} {'Stock':>7} {'Batch':>6}")
    click.echo("-" * 68)
    for p in products:
        stock = "-" if p.stock is None else str(p.stock)
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.sale_price:>12} {p.purchase_price:>12} "
            f"{stock:>7} {p.batch_size:>6}"
        )
