"""
Centralized error handlers for FastAPI.

Maps domain-specific errors and upstream failures to HTTP responses:

    RequestValidationError   -> 400
    ConflictingCursorsError  -> 409
    UpstreamSearchError      -> 400 / 503 / 500 (see error_classifier)
    anything else            -> 500

No stack traces or upstream internals are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.users.error_classifier import classify_upstream_failure
from app.domain.users.errors import (
    ConflictingCursorsError,
    UpstreamSearchError,
    UserSearchDomainError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_409 = 409
HTTP_500 = 500


def _error_response(
    status_code: int, error: str | None = None, message: str | None = None
) -> JSONResponse:
    """Build a consistent JSON error response.

    ``error`` defaults to the standard reason phrase of the status code.
    """
    body: dict[str, str] = {"error": error or HTTPStatus(status_code).phrase}
    if message:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)


def _validation_message(exc: RequestValidationError) -> str:
    """Summarize validation errors without echoing the submitted values."""
    parts = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", ()) if p not in ("query", "body")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed query parameters."""
        message = _validation_message(exc)
        logger.info("Invalid request: %s", message)
        return _error_response(HTTP_400, "Invalid query parameters", message)

    @app.exception_handler(ConflictingCursorsError)
    async def handle_conflicting_cursors(
        _request: Request, exc: ConflictingCursorsError
    ) -> JSONResponse:
        """Handle requests carrying both pagination cursors."""
        logger.info("Rejected request with both cursors")
        return _error_response(HTTP_409, "Conflicting pagination cursors", exc.message)

    @app.exception_handler(UpstreamSearchError)
    async def handle_upstream_search(
        _request: Request, exc: UpstreamSearchError
    ) -> JSONResponse:
        """Classify a failed upstream search into a status and message."""
        classification = classify_upstream_failure(exc.failure)
        logger.warning(
            "Upstream search failed: kind=%s, status=%d",
            classification.kind.value,
            classification.status_code,
        )
        return _error_response(
            classification.status_code, message=classification.message
        )

    @app.exception_handler(UserSearchDomainError)
    async def handle_user_search_domain(
        _request: Request, exc: UserSearchDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled users domain errors."""
        logger.error("Unhandled users domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
