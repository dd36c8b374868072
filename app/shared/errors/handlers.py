"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.trade.errors import (
    NavigationError,
    NegativeQuantityError,
    ParseError,
    QualificationError,
    TradeDomainError,
    TransportError,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)

HTTP_413 = 413
HTTP_422 = 422
HTTP_500 = 500
HTTP_502 = 502


def _error_response(
    status_code: int,
    error: str,
    kind: str | None = None,
    detail: str | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if kind:
        body["kind"] = kind
    if detail:
        body["detail"] = detail
    if path:
        body["path"] = path
    return JSONResponse(status_code=status_code, content=body)


class PayloadTooLargeError(Exception):
    """Raised by routes when a request body exceeds the configured limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Request body of {size} bytes exceeds {limit} bytes")
        self.size = size
        self.limit = limit


class MalformedBodyError(Exception):
    """Raised by routes when a request body cannot be decoded as text."""

    kind = "parse"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ParseError)
    async def handle_parse(_request: Request, exc: ParseError) -> JSONResponse:
        """Handle malformed trade documents."""
        logger.warning("Parse error at %s: %s", exc.location, exc.reason)
        return _error_response(
            HTTP_422, "Malformed trade document", exc.kind, exc.reason, exc.location
        )

    @app.exception_handler(NavigationError)
    async def handle_navigation(
        _request: Request, exc: NavigationError
    ) -> JSONResponse:
        """Handle trade documents missing a node on the economic-terms path."""
        logger.warning("Navigation error: missing %s at %s", exc.step, exc.path)
        return _error_response(
            HTTP_422, "Incomplete trade document", exc.kind, exc.message, exc.path
        )

    @app.exception_handler(TypeMismatchError)
    async def handle_type_mismatch(
        _request: Request, exc: TypeMismatchError
    ) -> JSONResponse:
        """Handle unsupported product variants."""
        logger.warning("Type mismatch on %s: %s", exc.field, exc.variant)
        return _error_response(
            HTTP_422, "Unsupported product", exc.kind, exc.message, exc.path
        )

    @app.exception_handler(QualificationError)
    async def handle_qualification(
        _request: Request, exc: QualificationError
    ) -> JSONResponse:
        """Handle trades rejected by the qualifier."""
        logger.info("Qualification rejected: %s", exc.qualifier)
        return _error_response(HTTP_422, "Trade does not qualify", exc.kind, exc.message)

    @app.exception_handler(TransportError)
    async def handle_transport(_request: Request, exc: TransportError) -> JSONResponse:
        """Handle failures to retrieve the trade document."""
        logger.error("Transport error for %s: %s", exc.url, exc.reason)
        return _error_response(
            HTTP_502, "Trade document unavailable", exc.kind, exc.reason
        )

    @app.exception_handler(NegativeQuantityError)
    async def handle_negative_quantity(
        _request: Request, exc: NegativeQuantityError
    ) -> JSONResponse:
        """Handle a negative unwind magnitude (a configuration fault)."""
        logger.error("Negative quantity requested: %s", exc.value)
        return _error_response(HTTP_500, "Invalid unwind configuration", exc.kind)

    @app.exception_handler(PayloadTooLargeError)
    async def handle_payload_too_large(
        _request: Request, exc: PayloadTooLargeError
    ) -> JSONResponse:
        """Handle oversized request bodies."""
        logger.warning("Rejected body of %d bytes (limit %d)", exc.size, exc.limit)
        return _error_response(HTTP_413, "Request body too large")

    @app.exception_handler(MalformedBodyError)
    async def handle_malformed_body(
        _request: Request, exc: MalformedBodyError
    ) -> JSONResponse:
        """Handle request bodies that are not valid text."""
        logger.warning("Rejected undecodable body: %s", exc.reason)
        return _error_response(HTTP_422, "Malformed request body", exc.kind, exc.reason)

    @app.exception_handler(TradeDomainError)
    async def handle_trade_domain(
        _request: Request, exc: TradeDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled trade domain errors."""
        logger.error("Unhandled trade domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
