"""Shared formatting for displaying orders."""

from __future__ import annotations

import click

from stockmanager.application.dto import CustomerOrderDTO, OrderLineDTO, SupplierOrderDTO


def _display_lines(lines: list[OrderLineDTO], quantity_label: str) -> None:
    if not lines:
        click.echo("  (no order lines)")
        return
    click.echo(f"  {'Product':<10} {quantity_label:>8} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*49}")
    for line in lines:
        click.echo(
            f"  {line.product_id:<10} {line.quantity:>8} {line.unit_price:>14} {line.line_total:>14}"
        )
    click.echo(f"  {'-'*49}")


def display_customer_order(dto: CustomerOrderDTO) -> None:
    state = "SENT" if dto.is_sent else "UNSENT"
    click.echo(f"Customer order #{dto.id}  (status={state})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Date:     {dto.date}  delivery {dto.delivery_date}")
    click.echo()
    _display_lines(dto.lines, "Units")
    click.echo(f"  {'Order Total':<20} {dto.total:>29}")


def display_supplier_order(dto: SupplierOrderDTO) -> None:
    sent = "SENT" if dto.order_is_sent else "UNSENT"
    received = "RECEIVED" if dto.is_received else "NOT RECEIVED"
    click.echo(f"Supplier order #{dto.id}  (status={sent}, {received})")
    click.echo(f"Supplier: {dto.supplier_id}")
    click.echo(f"Date:     {dto.date}  delivery {dto.delivery_date}")
    click.echo()
    _display_lines(dto.lines, "Batches")
    click.echo(f"  {'Order Total':<20} {dto.total:>29}")
