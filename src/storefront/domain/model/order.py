"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its items. Items are value
records: they hold a product *id* and a price snapshot, never a live
Product, so the aggregate has no references back into the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import InvalidOrderStateError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self is not OrderStatus.PENDING


@dataclass(frozen=True)
class OrderItem:
    """One purchased line. Immutable once built."""

    product_id: int
    quantity: Quantity
    price: Money  # snapshot of Product.price at order time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.place()`` factory for new orders; it enforces the
    creation rules. ``__init__`` stays simple so repositories can
    reconstitute persisted orders without re-validating.
    """

    id: int | None
    user_id: int
    items: tuple[OrderItem, ...]
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(user_id: int, items: list[OrderItem]) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(id=None, user_id=user_id, items=tuple(items))

    # --- State transitions ----------------------------------------------------

    def cancel(self) -> None:
        """Transition PENDING -> CANCELLED.

        Stock restoration for the items must happen alongside this, in
        the same unit of work (coordinated by the application handler).
        """
        if self.status.is_terminal:
            raise InvalidOrderStateError(
                f"Only pending orders can be cancelled "
                f"(order #{self.id} is {self.status.value})"
            )
        self.status = OrderStatus.CANCELLED

    def deliver(self) -> None:
        """Transition PENDING -> DELIVERED (driven by fulfillment)."""
        if self.status.is_terminal:
            raise InvalidOrderStateError(
                f"Only pending orders can be delivered "
                f"(order #{self.id} is {self.status.value})"
            )
        self.status = OrderStatus.DELIVERED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return sum((item.line_total for item in self.items), Money.zero())

    def contains_product(self, product_id: int) -> bool:
        return any(item.product_id == product_id for item in self.items)
