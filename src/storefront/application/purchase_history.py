"""Application service: purchase-history query (read only).

Answers "has this user bought this product?" for review eligibility.
Only DELIVERED orders count; pending and cancelled ones do not.
"""

from __future__ import annotations

from typing import Callable

from storefront.domain.model.order import OrderStatus
from storefront.domain.unit_of_work import UnitOfWork


class PurchaseHistoryHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def has_user_purchased_product(self, user_id: int, product_id: int) -> bool:
        with self._uow_factory() as uow:
            return uow.orders.exists_with_product(
                user_id, product_id, OrderStatus.DELIVERED
            )
