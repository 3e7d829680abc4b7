"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI edges and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from storefront.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: int
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class OrderDTO:
    id: int
    order_date: datetime
    status: str
    user_id: int
    items: list[OrderItemDTO]
    total: Decimal


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: int
    product_name: str
    price: Decimal
    stock: int


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_date=order.order_date,
        status=order.status.value,
        user_id=order.user_id,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                price=item.price.amount,
            )
            for item in order.items
        ],
        total=order.total.amount,
    )
