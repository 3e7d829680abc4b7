"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_for_update(self, order_id: int) -> Order | None:
        """Return an order and lock its row until the unit of work ends."""

    @abstractmethod
    def list_all(self, user_id: int | None = None) -> list[Order]:
        """Return orders newest first, optionally only those of one user."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Stage a new order with its items; assigns ``order.id``."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Stage a status change of an existing order."""

    @abstractmethod
    def exists_with_product(
        self,
        user_id: int,
        product_id: int,
        status: OrderStatus,
    ) -> bool:
        """True if the user owns an order in ``status`` containing the product."""
