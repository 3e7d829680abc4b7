"""CLI commands for stock levels."""

from __future__ import annotations

import click

from storefront.application.set_stock import SetStockHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("set")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.pass_obj
def inventory_set(container: Container, product_id: int, stock: int) -> None:
    """Set the stock level of a product."""
    handler = SetStockHandler(container.uow_factory)

    try:
        handler.handle(product_id=product_id, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product #{product_id} set to {stock}")


@click.command("show")
@click.pass_obj
def inventory_show(container: Container) -> None:
    """Show current stock levels."""
    try:
        lines = ShowInventoryHandler(container.uow_factory).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Product':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 47)
    for line in lines:
        click.echo(
            f"{line.product_id:<6} {line.product_name:<20} "
            f"{'$' + format(line.price, '.2f'):>10} {line.stock:>8}"
        )
