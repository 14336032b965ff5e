"""CLI commands for placing and quoting orders."""

from __future__ import annotations

import click

from orderentry.application.build_order import BuildOrderHandler
from orderentry.application.dto import OrderItemSpec
from orderentry.application.quote_order import QuoteOrderHandler
from orderentry.domain.exceptions import DomainException
from orderentry.domain.model.result import Err
from orderentry.domain.model.summary import OrderSummary
from orderentry.infrastructure.bootstrap import order_service, product_repository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'Item1:1,Item2:2.5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'SKU:Quantity'."
            )
        sku, qty_str = pair.rsplit(":", 1)
        try:
            qty = float(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{sku}'."
            )
        specs.append(OrderItemSpec(sku=sku.strip(), quantity=qty))
    return specs


def _display_summary(summary: OrderSummary) -> None:
    click.echo(f"Order #{summary.order_id} placed  (number={summary.order_number})")
    click.echo(f"Customer: {summary.customer_id}")
    click.echo()
    click.echo(f"  {'Net total':<30} {summary.net_total:>12.2f}")
    for entry in summary.taxes:
        click.echo(
            f"  {entry.description:<20} {entry.rate:>8.2%} "
            f"{entry.rate * summary.net_total:>12.2f}"
        )
    click.echo(f"  {'-'*43}")
    click.echo(f"  {'Total':<30} {summary.total:>12.2f}")


@click.command("place")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'SKU:Qty,SKU:Qty'.")
def order_place(customer_id: int, items: str) -> None:
    """Validate, fulfill and price an order, then notify the customer."""
    specs = _parse_items(items)
    product_repo = product_repository()

    try:
        order = BuildOrderHandler(product_repo).handle(customer_id, specs)
        result = order_service().place_order(order)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(result, Err):
        raise click.ClickException(f"Order cannot be placed: {result.error}")

    _display_summary(result.value)


@click.command("quote")
@click.option("--items", required=True, help="Items as 'SKU:Qty,SKU:Qty'.")
def order_quote(items: str) -> None:
    """Show the pre-tax total of an order without placing it."""
    handler = QuoteOrderHandler(product_repo=product_repository())

    try:
        dto = handler.handle(_parse_items(items))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line items:      {dto.line_count}")
    click.echo(f"Net total:       {dto.net_total:.2f}")
    click.echo(f"Unique products: {'yes' if dto.has_unique_products else 'no'}")
