"""Application service: Register User use case."""

from __future__ import annotations

from typing import Callable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import Role, User
from storefront.domain.unit_of_work import UnitOfWork


class RegisterUserHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, name: str, email: str, role: str = "CUSTOMER") -> User:
        try:
            user_role = Role(role.upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown role: {role!r}") from exc

        user = User.register(name=name, email=email, role=user_role)

        with self._uow_factory() as uow:
            if uow.users.get_by_email(user.email) is not None:
                raise ValidationError(f"Email already registered: {user.email}")
            uow.users.add(user)
            uow.commit()
        return user
