"""FastAPI application factory and error mapping.

Domain exceptions are translated to HTTP here and nowhere else:

    EntityNotFoundError     -> 404
    ValidationError         -> 400
    InvalidOrderStateError  -> 400
    InsufficientStockError  -> 409
    PersistenceError        -> 500
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    InvalidOrderStateError,
    PersistenceError,
    ValidationError,
)
from storefront.infrastructure.api.routes import order_router, purchase_router
from storefront.infrastructure.api.schemas import ErrorResponse
from storefront.infrastructure.bootstrap import Container, build_container

logger = logging.getLogger(__name__)

_STATUS_BY_EXCEPTION: list[tuple[type[DomainException], int, str]] = [
    (EntityNotFoundError, 404, "Resource Not Found"),
    (ValidationError, 400, "Bad Request"),
    (InvalidOrderStateError, 400, "Bad Request"),
    (InsufficientStockError, 409, "Conflict"),
    (PersistenceError, 500, "Internal Server Error"),
]


def create_app(container: Container | None = None) -> FastAPI:
    app = FastAPI(title="Storefront Order Service")
    app.state.container = container or build_container()

    app.include_router(order_router)
    app.include_router(purchase_router)
    app.add_exception_handler(DomainException, _handle_domain_exception)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "storefront"}

    return app


# ── Error handlers ───────────────────────────────


def _error_response(request: Request, status: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status,
        error=error,
        message=message,
        details=f"uri={request.url.path}",
    )
    return JSONResponse(status_code=status, content=jsonable_encoder(body))


async def _handle_domain_exception(request: Request, exc: DomainException) -> JSONResponse:
    for exc_type, status, error in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            break
    else:
        status, error = 500, "Internal Server Error"

    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error_response(request, status, error, str(exc))


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return _error_response(request, 400, "Validation Error", f"Input validation failed: {problems}")
