"""SQLAlchemy-backed implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.domain.model.user import Role, User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.orm import UserRow


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: int) -> User | None:
        row = self._session.get(UserRow, user_id)
        return self._to_domain(row) if row is not None else None

    def get_by_email(self, email: str) -> User | None:
        row = self._session.scalars(
            select(UserRow).where(UserRow.email == email.lower())
        ).first()
        return self._to_domain(row) if row is not None else None

    def add(self, user: User) -> None:
        row = UserRow(name=user.name, email=user.email, role=user.role.value)
        self._session.add(row)
        self._session.flush()
        user.id = row.id

    @staticmethod
    def _to_domain(row: UserRow) -> User:
        return User(id=row.id, name=row.name, email=row.email, role=Role(row.role))
