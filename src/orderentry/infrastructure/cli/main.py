import click

from orderentry.infrastructure import bootstrap
from orderentry.infrastructure.cli.order_commands import order_place, order_quote
from orderentry.infrastructure.cli.product_commands import product_list
from orderentry.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Order Entry: place orders against the catalog"""
    level = "DEBUG" if verbose else bootstrap.log_level()
    try:
        setup_logging(level=level, log_file=bootstrap.log_file())
    except ValueError:
        raise click.BadParameter(
            f"Unknown log level '{level}' (set via ORDERENTRY_LOG_LEVEL)."
        )


@cli.group()
def order() -> None:
    """Place and price orders."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_quote)
product.add_command(product_list)
