"""Tests for the SQLAlchemy repositories and unit of work against SQLite."""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.deliver_order import DeliverOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.purchase_history import PurchaseHistoryHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.exceptions import (
    InsufficientStockError,
    PersistenceError,
    ProductNotFoundError,
)
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository


def _stock(container, product_id: int) -> int:
    with container.uow_factory() as uow:
        return uow.products.get_by_id(product_id).stock


def _order_count(container) -> int:
    with container.uow_factory() as uow:
        return len(uow.orders.list_all())


class TestOrderRoundTrip:

    def test_place_and_reload(self, seeded):
        dto = PlaceOrderHandler(seeded.uow_factory).handle(1, [OrderItemSpec(1, 2)])

        loaded = ShowOrderHandler(seeded.uow_factory).handle(dto.id)
        assert loaded.status == "PENDING"
        assert loaded.user_id == 1
        assert [(i.product_id, i.quantity, i.price) for i in loaded.items] == [
            (1, 2, Decimal("99.99"))
        ]
        assert loaded.order_date.tzinfo is not None
        assert _stock(seeded, 1) == 8

    def test_items_keep_request_order(self, seeded):
        dto = PlaceOrderHandler(seeded.uow_factory).handle(
            1, [OrderItemSpec(2, 1), OrderItemSpec(1, 1)]
        )
        loaded = ShowOrderHandler(seeded.uow_factory).handle(dto.id)
        assert [i.product_id for i in loaded.items] == [2, 1]

    def test_list_by_user(self, seeded):
        place = PlaceOrderHandler(seeded.uow_factory)
        place.handle(1, [OrderItemSpec(1, 1)])
        place.handle(1, [OrderItemSpec(2, 1)])

        assert len(ListOrdersHandler(seeded.uow_factory).handle(user_id=1)) == 2
        assert ListOrdersHandler(seeded.uow_factory).handle(user_id=42) == []


class TestRejectionsLeaveNoTrace:

    def test_insufficient_stock(self, seeded):
        with pytest.raises(InsufficientStockError):
            PlaceOrderHandler(seeded.uow_factory).handle(1, [OrderItemSpec(1, 20)])

        assert _stock(seeded, 1) == 10
        assert _order_count(seeded) == 0

    def test_unknown_product_after_valid_line(self, seeded):
        with pytest.raises(ProductNotFoundError):
            PlaceOrderHandler(seeded.uow_factory).handle(
                1, [OrderItemSpec(1, 2), OrderItemSpec(99, 1)]
            )

        assert _stock(seeded, 1) == 10

    def test_failed_order_insert_rolls_back_stock(self, seeded, monkeypatch):
        def failing_add(self, order):
            raise IntegrityError("INSERT INTO orders", {}, Exception("constraint failed"))

        monkeypatch.setattr(SqlOrderRepository, "add", failing_add)

        with pytest.raises(PersistenceError, match="Storage operation failed"):
            PlaceOrderHandler(seeded.uow_factory).handle(1, [OrderItemSpec(1, 2)])

        monkeypatch.undo()
        assert _stock(seeded, 1) == 10
        assert _order_count(seeded) == 0


class TestLifecycle:

    def test_cancel_restores_stock(self, seeded):
        dto = PlaceOrderHandler(seeded.uow_factory).handle(
            1, [OrderItemSpec(1, 3), OrderItemSpec(2, 3)]
        )
        assert _stock(seeded, 2) == 0

        CancelOrderHandler(seeded.uow_factory).handle(dto.id)

        assert _stock(seeded, 1) == 10
        assert _stock(seeded, 2) == 3
        assert ShowOrderHandler(seeded.uow_factory).handle(dto.id).status == "CANCELLED"

    def test_purchase_history_reads_delivered_orders(self, seeded):
        dto = PlaceOrderHandler(seeded.uow_factory).handle(1, [OrderItemSpec(2, 1)])
        history = PurchaseHistoryHandler(seeded.uow_factory)
        assert not history.has_user_purchased_product(1, 2)

        DeliverOrderHandler(seeded.uow_factory).handle(dto.id)

        assert history.has_user_purchased_product(1, 2)
        assert not history.has_user_purchased_product(1, 1)

    def test_exists_with_product_filters_by_status(self, seeded):
        PlaceOrderHandler(seeded.uow_factory).handle(1, [OrderItemSpec(1, 1)])

        with seeded.uow_factory() as uow:
            assert uow.orders.exists_with_product(1, 1, OrderStatus.PENDING)
            assert not uow.orders.exists_with_product(1, 1, OrderStatus.DELIVERED)


class TestUnitOfWork:

    def test_uncommitted_writes_are_discarded(self, seeded):
        with seeded.uow_factory() as uow:
            product = uow.products.get_for_update(1)
            product.set_stock(0)
            uow.products.save_all([product])

        assert _stock(seeded, 1) == 10

    def test_database_constraint_surfaces_as_persistence_error(self, seeded):
        with pytest.raises(PersistenceError):
            with seeded.uow_factory() as uow:
                product = uow.products.get_for_update(1)
                # Bypass the domain guard to hit the CHECK constraint
                product.stock = -1
                uow.products.save_all([product])
                uow.commit()

        assert _stock(seeded, 1) == 10
