"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.orm import OrderItemRow, OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        row = self._session.get(OrderRow, order_id)
        return self._to_domain(row) if row is not None else None

    def get_for_update(self, order_id: int) -> Order | None:
        stmt = (
            select(OrderRow)
            .where(OrderRow.id == order_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        row = self._session.scalars(stmt).one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_all(self, user_id: int | None = None) -> list[Order]:
        stmt = select(OrderRow).order_by(OrderRow.order_date.desc(), OrderRow.id.desc())
        if user_id is not None:
            stmt = stmt.where(OrderRow.user_id == user_id)
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def add(self, order: Order) -> None:
        row = OrderRow(
            user_id=order.user_id,
            order_date=order.order_date,
            status=order.status.value,
            items=[
                OrderItemRow(
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    price=item.price.amount,
                )
                for item in order.items
            ],
        )
        self._session.add(row)
        self._session.flush()
        order.id = row.id

    def save(self, order: Order) -> None:
        # Items are fixed at creation; only the status ever changes
        row = self._session.get(OrderRow, order.id)
        if row is None:
            raise OrderNotFoundError(order.id)
        row.status = order.status.value
        self._session.flush()

    def exists_with_product(
        self,
        user_id: int,
        product_id: int,
        status: OrderStatus,
    ) -> bool:
        stmt = select(
            exists()
            .where(OrderRow.user_id == user_id)
            .where(OrderRow.status == status.value)
            .where(OrderItemRow.order_id == OrderRow.id)
            .where(OrderItemRow.product_id == product_id)
        )
        return bool(self._session.scalar(stmt))

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        order_date = row.order_date
        if order_date.tzinfo is None:
            # SQLite drops the offset; everything is stored in UTC
            order_date = order_date.replace(tzinfo=timezone.utc)
        return Order(
            id=row.id,
            user_id=row.user_id,
            items=tuple(
                OrderItem(
                    product_id=item.product_id,
                    quantity=Quantity(item.quantity),
                    price=Money.of(item.price),
                )
                for item in row.items
            ),
            status=OrderStatus(row.status),
            order_date=order_date,
        )
