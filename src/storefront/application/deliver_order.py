"""Application service: Deliver Order use case.

Called by fulfillment once the parcel has arrived. A delivered order is
what makes a customer eligible to review the products in it.
"""

from __future__ import annotations

import logging
from typing import Callable

from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeliverOrderHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int) -> None:
        with self._uow_factory() as uow:
            order = uow.orders.get_for_update(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)

            order.deliver()
            uow.orders.save(order)
            uow.commit()

        logger.info("Order #%s delivered", order_id)
