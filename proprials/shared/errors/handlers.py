"""
Domain error to HTTP mapping.

404 for unknown ids, 409 for share and state conflicts, 400 for an
underfunded wallet, 422 for rejected amounts, 500 for anything else.
Bodies follow ErrorResponse and never carry a stack trace.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from proprials.domain.investing.errors import (
    InsufficientBalanceError,
    InsufficientSharesError,
    InvalidAmountError,
    InvalidTransactionStateError,
    InvestingDomainError,
    NotFoundError,
    PropertyNotActiveError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        """Handle unknown property, wallet, investment or notification ids."""
        logger.warning("%s not found: %s", exc.entity, exc.entity_id)
        return _error_response(HTTP_404, f"{exc.entity} not found")

    @app.exception_handler(InsufficientSharesError)
    async def handle_insufficient_shares(
        _request: Request, exc: InsufficientSharesError
    ) -> JSONResponse:
        logger.warning(
            "Insufficient shares in property=%s: requested %d, available %d",
            exc.property_id,
            exc.requested,
            exc.available,
        )
        return _error_response(
            HTTP_409,
            "Insufficient shares",
            f"{exc.available} shares available",
        )

    @app.exception_handler(PropertyNotActiveError)
    async def handle_property_not_active(
        _request: Request, exc: PropertyNotActiveError
    ) -> JSONResponse:
        logger.warning("Property %s is %s", exc.property_id, exc.status)
        return _error_response(HTTP_409, "Property not open for investment", exc.status)

    @app.exception_handler(InsufficientBalanceError)
    async def handle_insufficient_balance(
        _request: Request, exc: InsufficientBalanceError
    ) -> JSONResponse:
        """Balances stay out of the log."""
        logger.warning("Insufficient balance")
        return _error_response(HTTP_400, "Insufficient balance")

    @app.exception_handler(InvalidAmountError)
    async def handle_invalid_amount(
        _request: Request, exc: InvalidAmountError
    ) -> JSONResponse:
        logger.warning("Invalid amount rejected")
        return _error_response(HTTP_422, "Invalid amount", exc.message)

    @app.exception_handler(InvalidTransactionStateError)
    async def handle_invalid_transaction_state(
        _request: Request, exc: InvalidTransactionStateError
    ) -> JSONResponse:
        logger.warning("Invalid transaction transition %s -> %s", exc.current, exc.target)
        return _error_response(HTTP_409, "Invalid transaction state")

    @app.exception_handler(InvestingDomainError)
    async def handle_investing_domain(
        _request: Request, exc: InvestingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled investing domain errors."""
        logger.error("Unhandled investing domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
