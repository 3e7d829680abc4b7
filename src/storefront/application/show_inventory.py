"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from typing import Callable

from storefront.application.dto import InventoryLineDTO
from storefront.domain.unit_of_work import UnitOfWork


class ShowInventoryHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[InventoryLineDTO]:
        with self._uow_factory() as uow:
            products = uow.products.list_all()
        return [
            InventoryLineDTO(
                product_id=product.id,  # type: ignore[arg-type]
                product_name=product.name,
                price=product.price.amount,
                stock=product.stock,
            )
            for product in products
        ]
