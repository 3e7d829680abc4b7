"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Callable

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        name: str,
        price: str,
        stock: int = 0,
        category_id: int | None = None,
    ) -> Product:
        """Add a new product to the catalog with an initial stock level."""
        product = Product.create(
            name=name,
            price=Money.of(price),
            stock=stock,
            category_id=category_id,
        )
        with self._uow_factory() as uow:
            uow.products.add(product)
            uow.commit()
        return product
