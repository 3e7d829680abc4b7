"""Application service: Set Stock use case."""

from __future__ import annotations

import logging
from typing import Callable

from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int, stock: int) -> None:
        """Overwrite the stock level of a product (e.g. after a stock take)."""
        with self._uow_factory() as uow:
            product = uow.products.get_for_update(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            previous = product.stock
            product.set_stock(stock)
            uow.products.save_all([product])
            uow.commit()

        logger.info("Stock for product %s set from %d to %d", product_id, previous, stock)
