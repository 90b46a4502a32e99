import click

from phytoshop.infrastructure.cli.catalog_commands import (
    category_list,
    product_list,
    product_show,
)
from phytoshop.infrastructure.cli.shop_commands import shop
from phytoshop.log import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Phytoshop: traditional-medicine storefront"""
    configure_logging("DEBUG" if verbose else None)


@cli.group()
def product() -> None:
    """Browse products."""


@cli.group()
def category() -> None:
    """Browse categories."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
category.add_command(category_list)
cli.add_command(shop)
