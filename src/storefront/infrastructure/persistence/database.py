"""Engine and session factory construction.

Stock reservation is a read-check-write sequence, so every transaction
that touches stock must hold the product row from the read until commit:

- PostgreSQL / MySQL: repositories read with ``SELECT ... FOR UPDATE``.
  A statement timeout bounds how long a request waits on a lock.
- SQLite has no row locks and ignores ``FOR UPDATE``. Transactions are
  opened with ``BEGIN IMMEDIATE`` instead, which takes the database
  write lock up front; the driver's busy timeout bounds the wait.
"""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.orm import Base

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    backend = url.get_backend_name()

    connect_args: dict = {}
    if backend == "sqlite":
        connect_args = {"timeout": settings.db_timeout, "check_same_thread": False}
    elif backend == "postgresql":
        timeout_ms = int(settings.db_timeout * 1000)
        connect_args = {
            "options": f"-c statement_timeout={timeout_ms} -c lock_timeout={timeout_ms}"
        }

    engine = create_engine(url, echo=settings.sql_echo, connect_args=connect_args)
    if backend == "sqlite":
        _install_sqlite_locking(engine)

    logger.debug("Database engine created for %s", url.render_as_string(hide_password=True))
    return engine


def _install_sqlite_locking(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, _record) -> None:
        # Take transaction control away from pysqlite so "begin" below is honoured
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    Base.metadata.create_all(engine)
