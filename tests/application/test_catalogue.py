"""Tests for the catalogue collaborators: users, products and stock."""

from decimal import Decimal

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.set_stock import SetStockHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import ProductNotFoundError, ValidationError
from storefront.domain.model.user import Role
from tests.fakes import FakeUnitOfWork


class TestRegisterUser:

    def test_register(self):
        uow = FakeUnitOfWork()
        user = RegisterUserHandler(uow).handle("Alice", "Alice@Example.com")
        assert user.id == 1
        assert user.email == "alice@example.com"
        assert user.role == Role.CUSTOMER

    def test_admin_role(self):
        user = RegisterUserHandler(FakeUnitOfWork()).handle("Root", "root@example.com", "admin")
        assert user.role == Role.ADMIN

    def test_duplicate_email_rejected(self):
        uow = FakeUnitOfWork()
        RegisterUserHandler(uow).handle("Alice", "alice@example.com")
        with pytest.raises(ValidationError, match="already registered"):
            RegisterUserHandler(uow).handle("Alice Two", "ALICE@example.com")

    def test_bad_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            RegisterUserHandler(FakeUnitOfWork()).handle("Alice", "not-an-email")

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError, match="Unknown role"):
            RegisterUserHandler(FakeUnitOfWork()).handle("Alice", "a@example.com", "god")


class TestProducts:

    def test_add_product(self):
        uow = FakeUnitOfWork()
        product = AddProductHandler(uow).handle("Widget", "15.00", stock=4, category_id=3)
        assert product.id == 1
        assert uow.products.stock_of(1) == 4
        assert uow.products.get_by_id(1).category_id == 3

    def test_add_product_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(FakeUnitOfWork()).handle("Widget", "15.00", stock=-1)

    def test_add_product_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(FakeUnitOfWork()).handle("Widget", "0")

    def test_update_price(self):
        uow = FakeUnitOfWork()
        AddProductHandler(uow).handle("Widget", "15.00")
        UpdateProductHandler(uow).handle(1, "17.50")
        assert uow.products.get_by_id(1).price.amount == Decimal("17.50")

    def test_update_price_returns_normalised_price(self):
        uow = FakeUnitOfWork()
        AddProductHandler(uow).handle("Widget", "15.00")
        product = UpdateProductHandler(uow).handle(1, "17.5")
        assert str(product.price) == "$17.50"

    def test_update_unknown_product(self):
        with pytest.raises(ProductNotFoundError):
            UpdateProductHandler(FakeUnitOfWork()).handle(1, "17.50")


class TestStock:

    def test_set_stock(self):
        uow = FakeUnitOfWork()
        AddProductHandler(uow).handle("Widget", "15.00", stock=1)
        SetStockHandler(uow).handle(1, 40)
        assert uow.products.stock_of(1) == 40

    def test_set_negative_stock_rejected(self):
        uow = FakeUnitOfWork()
        AddProductHandler(uow).handle("Widget", "15.00", stock=1)
        with pytest.raises(ValidationError):
            SetStockHandler(uow).handle(1, -1)
        assert uow.products.stock_of(1) == 1

    def test_show_inventory(self):
        uow = FakeUnitOfWork()
        AddProductHandler(uow).handle("Widget", "15.00", stock=1)
        AddProductHandler(uow).handle("Gadget", "2.50", stock=9)

        lines = ShowInventoryHandler(uow).handle()

        assert [(line.product_name, line.stock) for line in lines] == [
            ("Widget", 1),
            ("Gadget", 9),
        ]
        assert lines[1].price == Decimal("2.50")
