"""Application service: Order Persistence Coordinator.

Commits an assembled order. Stock deductions go first as one batch
write, the order and its items next; both ride the caller's unit of work
so a failure on the order write also undoes the stock write.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.service.order_assembler import AssembledOrder
from storefront.domain.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class OrderPersistenceCoordinator:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def commit(self, assembled: AssembledOrder) -> OrderDTO:
        self._uow.products.save_all(assembled.products)
        self._uow.orders.add(assembled.order)
        self._uow.commit()

        order = assembled.order
        logger.info(
            "Order #%s placed for user %s (%d items, total %s)",
            order.id, order.user_id, len(order.items), order.total,
        )
        return order_to_dto(order)
