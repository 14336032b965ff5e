"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from orderentry.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'SKU':<12} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 32)
    for p in products:
        click.echo(f"{p.sku:<12} {str(p.price):>10} {repo.stock_of(p.sku):>8}")
