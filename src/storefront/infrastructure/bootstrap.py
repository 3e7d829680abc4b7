"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from sqlalchemy import Engine

from storefront.domain.unit_of_work import UnitOfWork
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.database import (
    create_db_engine,
    create_schema,
    create_session_factory,
)
from storefront.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork


@dataclass(frozen=True)
class Container:
    settings: Settings
    engine: Engine
    uow_factory: Callable[[], UnitOfWork]


def build_container(settings: Settings | None = None, create_tables: bool = True) -> Container:
    settings = settings or Settings.from_env()
    engine = create_db_engine(settings)
    if create_tables:
        create_schema(engine)
    session_factory = create_session_factory(engine)

    def uow_factory() -> UnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory)

    return Container(settings=settings, engine=engine, uow_factory=uow_factory)
