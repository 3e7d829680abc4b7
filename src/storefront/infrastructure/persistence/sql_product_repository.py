"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.orm import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductRow, product_id)
        return self._to_domain(row) if row is not None else None

    def get_for_update(self, product_id: int) -> Product | None:
        stmt = (
            select(ProductRow)
            .where(ProductRow.id == product_id)
            .with_for_update()
            # re-read the locked row even if this session saw it before
            .execution_options(populate_existing=True)
        )
        row = self._session.scalars(stmt).one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        rows = self._session.scalars(select(ProductRow).order_by(ProductRow.id))
        return [self._to_domain(row) for row in rows]

    def add(self, product: Product) -> None:
        row = ProductRow()
        self._apply(product, row)
        self._session.add(row)
        self._session.flush()
        product.id = row.id

    def save_all(self, products: list[Product]) -> None:
        for product in products:
            row = self._session.get(ProductRow, product.id)
            if row is None:
                raise ProductNotFoundError(product.id)
            self._apply(product, row)
        self._session.flush()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _apply(product: Product, row: ProductRow) -> None:
        row.name = product.name
        row.price = product.price.amount
        row.stock = product.stock
        row.category_id = product.category_id

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money.of(row.price),
            stock=row.stock,
            category_id=row.category_id,
        )
