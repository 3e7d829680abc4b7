"""Unit tests for Money and Quantity."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class TestMoneyParsing:

    @pytest.mark.parametrize(
        "raw, expected",
        [("25.99", "25.99"), (99.99, "99.99"), (15, "15.00"), ("3.14159", "3.14")],
    )
    def test_of_rounds_to_cents(self, raw, expected):
        assert Money.of(raw).amount == Decimal(expected)

    def test_of_rejects_text(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-0.01")

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError):
            Money(Decimal("Infinity"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(9.99)  # type: ignore[arg-type]


class TestMoneyArithmetic:

    def test_line_total(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_sum_from_zero(self):
        prices = [Money.of("99.99"), Money.of("25.00"), Money.of("25.00")]
        assert sum(prices, Money.zero()) == Money.of("149.99")

    def test_multiply_by_non_count(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5  # type: ignore[operator]

    def test_ordering(self):
        assert Money.of("5") < Money.of("10")
        assert max(Money.of("1"), Money.of("2")) == Money.of("2")

    def test_is_zero(self):
        assert Money.of(0).is_zero
        assert not Money.of("0.01").is_zero

    def test_display(self):
        assert str(Money.of("9.5")) == "$9.50"


class TestQuantity:

    def test_positive(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    @pytest.mark.parametrize("value", [2.5, "2", True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(value)
