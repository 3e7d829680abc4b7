"""Application service: Cancel Order use case.

Only PENDING orders can be cancelled. Cancelling is a status change plus
a compensating action: every item's quantity goes back onto its
product's stock. Both happen in one unit of work, so a second cancel
fails on the status check and stock is restored exactly once.
"""

from __future__ import annotations

import logging
from typing import Callable

from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int) -> None:
        with self._uow_factory() as uow:
            order = uow.orders.get_for_update(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)

            # Status check first: nothing is restocked for a non-pending order
            order.cancel()

            restocked: dict[int, Product] = {}
            for item in order.items:
                product = restocked.get(item.product_id)
                if product is None:
                    product = uow.products.get_for_update(item.product_id)
                if product is None:
                    logger.warning(
                        "Order #%s references missing product %s; skipping restock",
                        order_id, item.product_id,
                    )
                    continue
                product.restock(item.quantity.value)
                restocked[item.product_id] = product

            uow.products.save_all(list(restocked.values()))
            uow.orders.save(order)
            uow.commit()

        logger.info("Order #%s cancelled; stock restored for %d products",
                    order_id, len(restocked))
