"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from phytoshop.application.browse_catalog import (
    BrowseCatalogHandler,
    ListCategoriesHandler,
    ShowProductHandler,
)
from phytoshop.domain.exceptions import DomainException
from phytoshop.infrastructure.bootstrap import category_repository, product_repository


@click.command("list")
@click.option("--search", default=None, help="Text to look for in name or description.")
@click.option("--category", "category_id", default=None, help="Category ID to filter on.")
def product_list(search: str | None, category_id: str | None) -> None:
    """List products available for purchase."""
    handler = BrowseCatalogHandler(product_repo=product_repository())

    try:
        products = handler.handle(query=search, category_id=category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<28} {'Category':<18} {'Price':>12}")
    click.echo("-" * 69)
    for p in products:
        click.echo(f"{p.id:<8} {p.name:<28} {p.category:<18} {p.price:>12}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show the details of one product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{p.name}  ({p.category})")
    click.echo(f"Price:    {p.price}")
    click.echo(f"Rating:   {p.rating:.1f} ({p.reviews} reviews)")
    click.echo(f"Stock:    {'in stock' if p.in_stock else 'out of stock'}")
    if p.description:
        click.echo()
        click.echo(p.description)
    if p.usage:
        click.echo()
        click.echo(f"Usage: {p.usage}")
    if p.contraindications:
        click.echo()
        click.echo("Contraindications:")
        for item in p.contraindications:
            click.echo(f"  - {item}")


@click.command("list")
def category_list() -> None:
    """List product categories."""
    handler = ListCategoriesHandler(category_repo=category_repository())

    try:
        categories = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<8} {'Name':<24}")
    click.echo("-" * 33)
    for c in categories:
        click.echo(f"{c.id:<8} {c.name:<24}")
