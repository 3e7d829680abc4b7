"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Initial stock.")
@click.option("--category-id", type=int, default=None, help="Category ID.")
@click.pass_obj
def product_add(
    container: Container,
    name: str,
    price: str,
    stock: int,
    category_id: int | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(container.uow_factory)

    try:
        product = handler.handle(name=name, price=price, stock=stock, category_id=category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock} in stock)"
    )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(container: Container, product_id: int, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(container.uow_factory)

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} price updated to {product.price}")
