"""Request / response models for the HTTP API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.application.dto import OrderDTO


# Largest value an INTEGER primary key column can hold
MAX_ID = 2**63 - 1

EntityId = Annotated[int, Field(ge=1, le=MAX_ID, strict=True)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Requests ─────────────────────────────────────


class OrderItemRequest(CamelModel):
    product_id: EntityId
    # strict: JSON true is not a quantity
    quantity: int = Field(gt=0, le=MAX_ID, strict=True)


class CreateOrderRequest(CamelModel):
    user_id: EntityId
    items: list[OrderItemRequest] = Field(min_length=1)


# ── Responses ────────────────────────────────────


class OrderItemResponse(CamelModel):
    product_id: int
    quantity: int
    price: float


class OrderResponse(CamelModel):
    id: int
    order_date: datetime
    status: str
    user_id: int
    items: list[OrderItemResponse]

    @classmethod
    def from_dto(cls, dto: OrderDTO) -> OrderResponse:
        return cls(
            id=dto.id,
            order_date=dto.order_date,
            status=dto.status,
            user_id=dto.user_id,
            items=[
                OrderItemResponse(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=float(item.price),
                )
                for item in dto.items
            ],
        )


class PurchaseCheckResponse(CamelModel):
    user_id: int
    product_id: int
    purchased: bool


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    details: str
