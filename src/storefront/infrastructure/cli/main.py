import click
import uvicorn

from storefront.infrastructure.api.app import create_app
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.cli.inventory_commands import inventory_set, inventory_show
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_deliver,
    order_list,
    order_place,
    order_purchased,
    order_show,
)
from storefront.infrastructure.cli.product_commands import product_add, product_update
from storefront.infrastructure.cli.user_commands import user_add
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront: order placement and fulfillment"""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    ctx.obj = build_container(settings)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Manage stock levels."""


@cli.group()
def user() -> None:
    """Manage users."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.pass_obj
def serve(container: Container, host: str, port: int) -> None:
    """Run the HTTP API."""
    uvicorn.run(create_app(container), host=host, port=port)


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_deliver)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_purchased)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_update)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
user.add_command(user_add)
