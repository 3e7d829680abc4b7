"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.deliver_order import DeliverOrderHandler
from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.purchase_history import PurchaseHistoryHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product id : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        pid_str, qty_str = pair.split(":", 1)
        try:
            specs.append(OrderItemSpec(product_id=int(pid_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product id and quantity must be integers."
            )
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:    {dto.user_id}")
    click.echo(f"Date:    {dto.order_date.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*38}")
    for item in dto.items:
        line_total = item.price * item.quantity
        click.echo(
            f"  {item.product_id:<10} {item.quantity:>5} "
            f"{'$' + format(item.price, '.2f'):>10} {'$' + format(line_total, '.2f'):>10}"
        )
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Order Total':<17} {'$' + format(dto.total, '.2f'):>20}")


@click.command("place")
@click.option("--user-id", required=True, type=int, help="Purchasing user ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_place(container: Container, user_id: int, items: str) -> None:
    """Place a new order (reserves stock)."""
    specs = _parse_items(items)
    handler = PlaceOrderHandler(container.uow_factory)

    try:
        dto = handler.handle(user_id=user_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(container.uow_factory)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user-id", type=int, default=None, help="Only orders of this user.")
@click.pass_obj
def order_list(container: Container, user_id: int | None) -> None:
    """List orders, newest first."""
    try:
        dtos = ListOrdersHandler(container.uow_factory).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<6} {'Status':<10} {'Items':>5} {'Total':>12}")
    click.echo("-" * 43)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.user_id:<6} {dto.status:<10} {len(dto.items):>5} "
            f"{'$' + format(dto.total, '.2f'):>12}"
        )


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(container: Container, order_id: int) -> None:
    """Cancel a pending order (restores stock)."""
    handler = CancelOrderHandler(container.uow_factory)

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled, stock restored.")


@click.command("deliver")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to mark delivered.")
@click.pass_obj
def order_deliver(container: Container, order_id: int) -> None:
    """Mark a pending order as delivered."""
    handler = DeliverOrderHandler(container.uow_factory)

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} delivered.")


@click.command("purchased")
@click.option("--user-id", required=True, type=int, help="User ID.")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.pass_obj
def order_purchased(container: Container, user_id: int, product_id: int) -> None:
    """Tell whether a user has a delivered order containing a product."""
    handler = PurchaseHistoryHandler(container.uow_factory)

    try:
        purchased = handler.has_user_purchased_product(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if purchased:
        click.echo(f"User #{user_id} has purchased product #{product_id}.")
    else:
        click.echo(f"User #{user_id} has not purchased product #{product_id}.")
