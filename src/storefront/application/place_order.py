"""Application service: Place Order use case.

Validate → stage → commit, all inside one unit of work:

1. The OrderAssembler checks the user and every product (row-locked)
   and stages the stock reservations on in-memory snapshots.
2. The OrderPersistenceCoordinator writes stock and order together.

Any exception before ``commit()`` leaves the unit of work to roll back,
so no reservation survives a failed placement.
"""

from __future__ import annotations

from typing import Callable

from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.application.order_persistence import OrderPersistenceCoordinator
from storefront.domain.service.order_assembler import OrderAssembler, OrderLine
from storefront.domain.unit_of_work import UnitOfWork


class PlaceOrderHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int, item_specs: list[OrderItemSpec]) -> OrderDTO:
        lines = [OrderLine(spec.product_id, spec.quantity) for spec in item_specs]

        with self._uow_factory() as uow:
            assembled = OrderAssembler(uow).assemble(user_id, lines)
            return OrderPersistenceCoordinator(uow).commit(assembled)
