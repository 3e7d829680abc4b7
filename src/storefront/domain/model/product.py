"""Product aggregate.

Products live independently of orders. They own the one piece of state
the order flow contends for: ``stock``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is always set and greater than zero
    - ``stock`` is always an integer >= 0
    """

    id: int | None
    name: str
    price: Money
    stock: int = 0
    category_id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.price, Money) or self.price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError("Product stock must be an integer")
        if self.stock < 0:
            raise ValidationError("Product stock cannot be negative")

    @staticmethod
    def create(
        name: str,
        price: Money,
        stock: int,
        category_id: int | None = None,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            stock=stock,
            category_id=category_id,
        )

    # --- Stock ------------------------------------------------------------------

    def reserve(self, quantity: int) -> None:
        """Claim ``quantity`` units for an order.

        Raises InsufficientStockError if that would take stock below zero.
        """
        if quantity <= 0:
            raise ValidationError("Reservation quantity must be positive")
        if quantity > self.stock:
            raise InsufficientStockError(self.id, self.name, quantity, self.stock)
        self.stock -= quantity

    def restock(self, quantity: int) -> None:
        """Return ``quantity`` units, e.g. when an order is cancelled."""
        if quantity <= 0:
            raise ValidationError("Restock quantity must be positive")
        self.stock += quantity

    def set_stock(self, stock: int) -> None:
        if stock < 0:
            raise ValidationError("Product stock cannot be negative")
        self.stock = stock

    # --- Pricing ----------------------------------------------------------------

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        if new_price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
