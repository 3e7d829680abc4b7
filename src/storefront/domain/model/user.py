"""User aggregate.

Users are owned by the identity side of the shop. The order flow only
reads them to check that the purchaser exists.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Role(Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


@dataclass
class User:
    id: int | None
    name: str
    email: str
    role: Role = Role.CUSTOMER

    @staticmethod
    def register(name: str, email: str, role: Role = Role.CUSTOMER) -> User:
        """Create a new user, enforcing basic identity rules."""
        if not name or not name.strip():
            raise ValidationError("User name is required")
        email = (email or "").strip().lower()
        if not _EMAIL_RE.match(email):
            raise ValidationError(f"Invalid email address: {email!r}")
        return User(id=None, name=name.strip(), email=email, role=role)
