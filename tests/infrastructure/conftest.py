"""Shared fixtures: a real SQLite database per test, seeded through the handlers."""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.config import Settings


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'storefront.db'}"


@pytest.fixture
def container(database_url) -> Container:
    built = build_container(Settings(database_url=database_url, db_timeout=10.0))
    yield built
    built.engine.dispose()


@pytest.fixture
def seeded(container) -> Container:
    """User #1 Alice; product #1 Widget $99.99 x10; product #2 Gadget $25.00 x3."""
    RegisterUserHandler(container.uow_factory).handle("Alice", "alice@example.com")
    add_product = AddProductHandler(container.uow_factory)
    add_product.handle("Widget", "99.99", stock=10)
    add_product.handle("Gadget", "25.00", stock=3)
    return container
