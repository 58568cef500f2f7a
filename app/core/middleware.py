from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
import logging
from typing import Sequence, Any

from app.schemas.error import ErrorCategory, ErrorResponse
from app.core.exception import CustomException

logger = logging.getLogger(__name__)

# The only place where an error category becomes an HTTP status code
STATUS_CODES = {
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.FOREIGN_KEY: 409,
    ErrorCategory.DELETE_INTEGRITY: 409,
    ErrorCategory.RESOURCE_CONFLICT: 409,
    ErrorCategory.BAD_REQUEST: 400,
    ErrorCategory.VALIDATION: 422,
    ErrorCategory.INTERNAL: 500,
}


def create_error_response(category: ErrorCategory, message: str, path: str) -> JSONResponse:
    """Create the standardized JSON error response for a category"""
    status_code = STATUS_CODES[category]
    body = ErrorResponse(status=status_code, massage=message, path=path)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def format_validation_error(errors: Sequence[Any]) -> str:
    """Format validation errors into human-readable message"""
    messages = []
    for error in errors:
        loc = " -> ".join(str(loc) for loc in error.get("loc", []))
        msg = error.get("msg", "Unknown error")
        error_type = error.get("type", "unknown")

        messages.append(f"Error in {loc}: {msg} (type: {error_type})")

    return "; ".join(messages) if messages else "Validation failed"


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """
    Centralized exception handling middleware for consistent API responses.
    Catches every exception escaping a route and turns it into an ErrorResponse.
    """

    def __init__(self, app, log_internal_errors: bool = True):
        super().__init__(app)
        self.log_internal_errors = log_internal_errors
        self._register_handlers()

    def _register_handlers(self):
        """Register exception type to handler method mappings"""
        self.EXCEPTION_HANDLERS = {
            CustomException: self._handle_custom_exception,
            IntegrityError: self._handle_integrity_error,
        }

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as ex:
            return await self._handle_exception(ex, request)

    async def _handle_exception(self, ex: Exception, request: Request) -> JSONResponse:
        """Route exception to the appropriate handler."""
        for exc_type, handler in self.EXCEPTION_HANDLERS.items():
            if isinstance(ex, exc_type):
                return await handler(ex, request)

        return await self._handle_unhandled_exception(ex, request)

    async def _handle_custom_exception(
        self, ex: CustomException, request: Request
    ) -> JSONResponse:
        """Handle custom application exceptions"""
        return create_error_response(ex.category, ex.message, request.url.path)

    async def _handle_integrity_error(
        self, ex: IntegrityError, request: Request
    ) -> JSONResponse:
        """Handle store constraint violations that no service translated"""
        logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, ex.orig)
        return create_error_response(
            ErrorCategory.FOREIGN_KEY,
            "The request violates a data integrity constraint.",
            request.url.path,
        )

    async def _handle_unhandled_exception(
        self, ex: Exception, request: Request
    ) -> JSONResponse:
        """Handle unexpected exceptions"""
        if self.log_internal_errors:
            logger.error(
                f"Unhandled exception on {request.method} {request.url.path}",
                exc_info=ex,
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "client": request.client.host if request.client else None,
                },
            )

        # Don't expose internal error details in production
        return create_error_response(
            ErrorCategory.INTERNAL,
            "An unexpected error occurred. Please try again later.",
            request.url.path,
        )


def _infer_category_from_status(status_code: int) -> ErrorCategory:
    """Infer error category from HTTP status code"""
    status_category_map = {
        404: ErrorCategory.NOT_FOUND,
        409: ErrorCategory.RESOURCE_CONFLICT,
        422: ErrorCategory.VALIDATION,
    }
    if status_code in status_category_map:
        return status_category_map[status_code]
    elif status_code >= 500:
        return ErrorCategory.INTERNAL
    return ErrorCategory.BAD_REQUEST


async def _handle_validation_error(request: Request, ex: RequestValidationError) -> JSONResponse:
    return create_error_response(
        ErrorCategory.VALIDATION,
        format_validation_error(ex.errors()),
        request.url.path,
    )


async def _handle_http_exception(request: Request, ex: StarletteHTTPException) -> JSONResponse:
    # Unknown routes and wrong verbs keep their own status code
    category = _infer_category_from_status(ex.status_code)
    message = ex.detail if isinstance(ex.detail, str) else str(ex.detail)
    if STATUS_CODES[category] == ex.status_code:
        return create_error_response(category, message, request.url.path)
    body = ErrorResponse(status=ex.status_code, massage=message, path=request.url.path)
    return JSONResponse(status_code=ex.status_code, content=body.model_dump(), headers=ex.headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Route framework-level errors through the same error envelope.

    Request validation and routing errors are resolved by FastAPI before the
    middleware sees them, so they need handlers of their own.
    """
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
