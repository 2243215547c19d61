"""
Error Handling Middleware
Centralized error handling for the FastAPI application: unhandled
exceptions are logged with request context and converted to standardized
error responses.
"""

import logging
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from ..error_handling import (
    APIException,
    ErrorDetail,
    StandardErrorResponse,
    ErrorCategory,
    ErrorCode,
    create_error_response,
)

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Catches all unhandled exceptions and converts them to standardized
    error responses.
    """

    def __init__(self, app: FastAPI, include_debug_info: bool = False):
        super().__init__(app)
        self.include_debug_info = include_debug_info

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and handle any exceptions that occur."""
        start_time = time.time()

        try:
            response = await call_next(request)

            processing_time = time.time() - start_time
            if response.status_code >= 400:
                logger.warning(
                    f"Request failed: {request.method} {request.url.path} "
                    f"-> {response.status_code} ({processing_time:.3f}s)"
                )

            return response

        except Exception as exc:
            processing_time = time.time() - start_time

            logger.error(
                f"Unhandled exception in middleware: {request.method} {request.url.path} "
                f"-> {type(exc).__name__}: {str(exc)} ({processing_time:.3f}s)",
                exc_info=True
            )

            return create_error_response(
                exception=exc,
                request=request,
                include_debug_info=self.include_debug_info
            )


def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Convert FastAPI request validation errors to the standard format."""
    details = [
        ErrorDetail(
            field=" -> ".join(str(loc) for loc in error.get("loc", [])),
            provided_value=str(error.get("input", ""))[:100],
            help_text=error.get("msg", ""),
        )
        for error in exc.errors()
    ]

    error_response = StandardErrorResponse.create(
        code=ErrorCode.VALIDATION_ERROR,
        message=f"Request validation failed with {len(details)} error(s)",
        category=ErrorCategory.VALIDATION,
        status_code=400,
        details=details,
    )
    return JSONResponse(status_code=400, content=error_response.dict())


def setup_error_handling(app: FastAPI, include_debug_info: bool = False) -> None:
    """Register exception handlers and the error handling middleware."""

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
        return create_error_response(exc, request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return create_error_response(exc, request)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return handle_request_validation_error(request, exc)

    app.add_middleware(ErrorHandlingMiddleware, include_debug_info=include_debug_info)

    logger.debug("Error handling configured")
