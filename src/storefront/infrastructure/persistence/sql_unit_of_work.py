"""SQLAlchemy-backed Unit of Work.

One Session per unit of work, so each request (and each worker thread)
gets its own transaction. Any SQLAlchemy failure inside the ``with``
block, including lock and statement timeouts, is rolled back and
re-raised as PersistenceError.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import PersistenceError
from storefront.domain.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from storefront.infrastructure.persistence.sql_user_repository import SqlUserRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def _begin(self) -> None:
        self._session = self._session_factory()
        self.users = SqlUserRepository(self._session)
        self.products = SqlProductRepository(self._session)
        self.orders = SqlOrderRepository(self._session)

    def __exit__(self, exc_type, exc, tb) -> None:
        super().__exit__(exc_type, exc, tb)
        if isinstance(exc, SQLAlchemyError):
            logger.error("Transaction rolled back after storage failure: %s", exc)
            raise PersistenceError(f"Storage operation failed: {exc}") from exc

    def commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            logger.error("Commit failed: %s", exc)
            raise PersistenceError(f"Could not commit transaction: {exc}") from exc

    def rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()

    def _end(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
