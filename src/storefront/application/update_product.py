"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Callable

from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int, new_price: str) -> Product:
        """Update a product's price.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        with self._uow_factory() as uow:
            product = uow.products.get_for_update(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            product.update_price(Money.of(new_price))
            uow.products.save_all([product])
            uow.commit()
        return product
