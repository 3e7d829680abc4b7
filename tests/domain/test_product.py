"""Unit tests for the Product aggregate and its stock invariant."""

import pytest

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _product(stock: int = 10, price: str = "99.99") -> Product:
    return Product(id=1, name="Widget", price=Money.of(price), stock=stock)


class TestProductConstruction:

    def test_create_strips_name(self):
        product = Product.create("  Widget ", Money.of("5.00"), stock=3)
        assert product.name == "Widget"
        assert product.id is None

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("  ", Money.of("5.00"), stock=3)

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _product(price="0")

    def test_missing_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product(id=1, name="Widget", price=None, stock=1)  # type: ignore[arg-type]

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product(stock=-1)

    def test_missing_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product(id=1, name="Widget", price=Money.of("1"), stock=None)  # type: ignore[arg-type]


class TestProductReserve:

    def test_reserve_reduces_stock(self):
        product = _product(stock=10)
        product.reserve(2)
        assert product.stock == 8

    def test_reserve_entire_stock(self):
        product = _product(stock=10)
        product.reserve(10)
        assert product.stock == 0

    def test_reserve_more_than_stock_rejected(self):
        product = _product(stock=10)
        with pytest.raises(InsufficientStockError, match="Insufficient stock") as info:
            product.reserve(20)
        assert info.value.product_id == 1
        assert info.value.requested == 20
        assert info.value.available == 10
        assert product.stock == 10

    def test_reserve_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _product().reserve(0)


class TestProductRestock:

    def test_restock_adds_back(self):
        product = _product(stock=5)
        product.restock(3)
        assert product.stock == 8

    def test_restock_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _product().restock(-1)

    def test_set_stock(self):
        product = _product(stock=5)
        product.set_stock(0)
        assert product.stock == 0

    def test_set_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product().set_stock(-4)


class TestProductPricing:

    def test_update_price(self):
        product = _product()
        product.update_price(Money.of("120.00"))
        assert product.price == Money.of("120.00")

    def test_update_to_zero_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _product().update_price(Money.of("0"))
