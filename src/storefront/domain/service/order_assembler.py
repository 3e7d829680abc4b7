"""Domain service: Order Assembler.

Turns a purchase request into an in-memory order plus the product
snapshots whose stock it reserves. Nothing is written here; the caller
commits the result through the unit of work.

The two-phase approach (validate-then-mutate) ensures we never stage a
partial reservation: if any line fails, no product has been touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Quantity
from storefront.domain.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderLine:
    """What the customer asked for: a product id and how many."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class AssembledOrder:
    """An order shell ready to persist, with the products it reserved from."""

    order: Order
    products: list[Product]


class OrderAssembler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def assemble(self, user_id: int, lines: list[OrderLine]) -> AssembledOrder:
        """Validate a request and stage its stock reservations.

        Phase 1 (load and validate, in line order): the user exists, each
        product exists (row-locked), and the quantity requested for each
        product, summed over its lines, fits in stock.

        Phase 2 (mutate): decrement stock on the loaded snapshots and
        build items carrying the current price.
        """
        if not lines:
            raise ValidationError("Order must contain at least one item")
        if self._uow.users.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        # Phase 1: load every product once and validate
        products: dict[int, Product] = {}
        requested: dict[int, int] = {}
        quantities: list[Quantity] = []

        for line in lines:
            qty = Quantity(line.quantity)
            product = products.get(line.product_id)
            if product is None:
                product = self._uow.products.get_for_update(line.product_id)
                if product is None:
                    raise ProductNotFoundError(line.product_id)
                products[line.product_id] = product

            total = requested.get(line.product_id, 0) + qty.value
            if total > product.stock:
                logger.info(
                    "Rejecting order for user %s: product %s has %d in stock, %d requested",
                    user_id, product.id, product.stock, total,
                )
                raise InsufficientStockError(product.id, product.name, total, product.stock)
            requested[line.product_id] = total
            quantities.append(qty)

        # Phase 2: stage reservations and capture prices
        items: list[OrderItem] = []
        for line, qty in zip(lines, quantities):
            product = products[line.product_id]
            product.reserve(qty.value)
            items.append(
                OrderItem(
                    product_id=line.product_id,
                    quantity=qty,
                    price=product.price,  # <-- price snapshot
                )
            )

        return AssembledOrder(
            order=Order.place(user_id=user_id, items=items),
            products=list(products.values()),
        )
