"""CLI commands for users."""

from __future__ import annotations

import click

from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--name", required=True, help="Full name.")
@click.option("--email", required=True, help="E-mail address (unique).")
@click.option(
    "--role",
    type=click.Choice(["CUSTOMER", "ADMIN"], case_sensitive=False),
    default="CUSTOMER",
    show_default=True,
)
@click.pass_obj
def user_add(container: Container, name: str, email: str, role: str) -> None:
    """Register a user."""
    handler = RegisterUserHandler(container.uow_factory)

    try:
        user = handler.handle(name=name, email=email, role=role)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.name}' <{user.email}> registered as {user.role.value}")
