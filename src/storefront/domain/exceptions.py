"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and translate them into
status codes or user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated by the caller's input."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    entity = "Entity"

    def __init__(self, entity_id: object) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity} not found with id: {entity_id}")


class UserNotFoundError(EntityNotFoundError):
    entity = "User"


class ProductNotFoundError(EntityNotFoundError):
    entity = "Product"


class OrderNotFoundError(EntityNotFoundError):
    entity = "Order"


class InsufficientStockError(DomainException):
    """A reservation asked for more units than the product has in stock.

    This is a business rejection, not a system fault.
    """

    def __init__(
        self,
        product_id: int | None,
        product_name: str,
        requested: int,
        available: int,
    ) -> None:
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product: {product_name} "
            f"(requested {requested}, available {available})"
        )


class InvalidOrderStateError(DomainException):
    """An order transition was attempted from a status that forbids it."""


class PersistenceError(DomainException):
    """Storage failed; the surrounding transaction has been rolled back."""
