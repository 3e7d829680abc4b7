"""FastAPI routes for orders and purchase history.

Endpoints are plain ``def`` functions: FastAPI runs each request on its
own worker thread, and every handler opens its own unit of work.
"""

from __future__ import annotations

from typing import Annotated, Callable

from fastapi import APIRouter, Depends, Path, Query, Request, Response

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.deliver_order import DeliverOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.purchase_history import PurchaseHistoryHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.unit_of_work import UnitOfWork
from storefront.infrastructure.api.schemas import (
    CreateOrderRequest,
    MAX_ID,
    OrderResponse,
    PurchaseCheckResponse,
)


PathId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_uow_factory(request: Request) -> Callable[[], UnitOfWork]:
    return request.app.state.container.uow_factory


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
def place_order(
    req: CreateOrderRequest,
    uow_factory: Callable[[], UnitOfWork] = Depends(get_uow_factory),
) -> OrderResponse:
    specs = [OrderItemSpec(item.product_id, item.quantity) for item in req.items]
    dto = PlaceOrderHandler(uow_factory).handle(req.user_id, specs)
    return OrderResponse.from_dto(dto)


@order_router.get("", response_model=list[OrderResponse])
def list_orders(
    user_id: int | None = Query(default=None, alias="userId", ge=1, le=MAX_ID),
    uow_factory: Callable[[], UnitOfWork] = Depends(get_uow_factory),
) -> list[OrderResponse]:
    dtos = ListOrdersHandler(uow_factory).handle(user_id)
    return [OrderResponse.from_dto(dto) for dto in dtos]


@order_router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: PathId,
    uow_factory: Callable[[], UnitOfWork] = Depends(get_uow_factory),
) -> OrderResponse:
    return OrderResponse.from_dto(ShowOrderHandler(uow_factory).handle(order_id))


@order_router.post("/{order_id}/cancel", status_code=204)
def cancel_order(
    order_id: PathId,
    uow_factory: Callable[[], UnitOfWork] = Depends(get_uow_factory),
) -> Response:
    CancelOrderHandler(uow_factory).handle(order_id)
    return Response(status_code=204)


@order_router.post("/{order_id}/deliver", status_code=204)
def deliver_order(
    order_id: PathId,
    uow_factory: Callable[[], UnitOfWork] = Depends(get_uow_factory),
) -> Response:
    DeliverOrderHandler(uow_factory).handle(order_id)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Purchase History Router
# ---------------------------------------------------------------------------
purchase_router = APIRouter(prefix="/users", tags=["purchases"])


@purchase_router.get(
    "/{user_id}/purchases/{product_id}", response_model=PurchaseCheckResponse
)
def has_purchased(
    user_id: PathId,
    product_id: PathId,
    uow_factory: Callable[[], UnitOfWork] = Depends(get_uow_factory),
) -> PurchaseCheckResponse:
    purchased = PurchaseHistoryHandler(uow_factory).has_user_purchased_product(
        user_id, product_id
    )
    return PurchaseCheckResponse(user_id=user_id, product_id=product_id, purchased=purchased)
