"""Unit of Work: the atomic boundary for writes across aggregates.

Usage::

    with uow_factory() as uow:          # begin
        product = uow.products.get_for_update(1)
        product.reserve(2)
        uow.products.save_all([product])  # staged
        uow.orders.add(order)             # staged
        uow.commit()                      # both writes, or neither

Leaving the ``with`` block without ``commit()`` rolls back everything
staged, including when an exception escapes the block.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    users: UserRepository
    products: ProductRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def commit(self) -> None:
        """Make every staged write durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every staged write. A no-op after ``commit()``."""

    @abstractmethod
    def _begin(self) -> None:
        """Open the transaction and bind the repositories to it."""

    def _end(self) -> None:
        """Release resources held for the transaction."""
