"""
Unified Error Handling
Error response standardization with consistent HTTP status codes,
error categorization, correlation IDs, and structured logging.
"""

import logging
import uuid
from datetime import datetime
from enum import Enum, auto
from typing import Any

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

# Configure error handling logger
error_logger = logging.getLogger("api.errors")

CORRELATION_HEADER = "X-Correlation-ID"


class ErrorCategory(str, Enum):
    """Error categorization for better error handling and monitoring."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SYSTEM = "system"


class _AutoStrEnum(str, Enum):
    """Enum helper that sets value equal to the member name."""

    def _generate_next_value_(self, start, count, last_values) -> Any:
        return self


class ErrorCode(_AutoStrEnum):
    """Standardized error codes for API responses."""

    # Validation Errors (400)
    VALIDATION_ERROR = auto()

    # Not Found Errors (404)
    RESOURCE_NOT_FOUND = auto()
    PAGE_NOT_FOUND = auto()
    ENDPOINT_NOT_FOUND = auto()

    # System Errors (500)
    INTERNAL_SERVER_ERROR = auto()
    TEMPLATE_ERROR = auto()
    CONFIGURATION_ERROR = auto()


class ErrorDetail(BaseModel):
    """Detailed error information for specific fields or constraints."""

    field: str | None = Field(None, description="Field that caused the error")
    provided_value: str | None = Field(
        None, description="Value that caused the error (sanitized)"
    )
    help_text: str | None = Field(
        None, description="Helpful guidance for fixing the error"
    )


class StandardErrorResponse(BaseModel):
    """Unified error response model."""

    success: bool = Field(False, description="Always false for error responses")
    error: dict[str, Any] = Field(..., description="Error information")

    @classmethod
    def create(
        cls,
        code: ErrorCode,
        message: str,
        category: ErrorCategory,
        status_code: int,
        correlation_id: str | None = None,
        details: ErrorDetail | list[ErrorDetail] | None = None,
    ) -> "StandardErrorResponse":
        """Create a standardized error response."""

        if correlation_id is None:
            correlation_id = str(uuid.uuid4())

        error_data = {
            "code": code.value,
            "message": message,
            "category": category.value,
            "status_code": status_code,
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
        }

        if details:
            if isinstance(details, list):
                error_data["details"] = [detail.dict() for detail in details]
            else:
                error_data["details"] = details.dict()

        return cls(error=error_data)


class APIException(HTTPException):
    """Base API exception with enhanced error information."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        category: ErrorCategory,
        status_code: int,
        details: ErrorDetail | list[ErrorDetail] | None = None,
        correlation_id: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.category = category
        self.details = details
        self.correlation_id = correlation_id or str(uuid.uuid4())

        super().__init__(status_code=status_code, detail=message)


class ResourceNotFoundException(APIException):
    """Resource not found exception (404 Not Found)."""

    def __init__(
        self,
        resource_type: str = "resource",
        resource_id: str | None = None,
        message: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        if message is None:
            if resource_id:
                message = f"{resource_type.title()} '{resource_id}' not found"
            else:
                message = f"{resource_type.title()} not found"

        code_mapping = {
            "page": ErrorCode.PAGE_NOT_FOUND,
            "endpoint": ErrorCode.ENDPOINT_NOT_FOUND,
        }

        super().__init__(
            code=code_mapping.get(resource_type.lower(), ErrorCode.RESOURCE_NOT_FOUND),
            message=message,
            category=ErrorCategory.NOT_FOUND,
            status_code=status.HTTP_404_NOT_FOUND,
            correlation_id=correlation_id,
        )


class PageNotFoundException(ResourceNotFoundException):
    """
    Unknown page identifier or a page whose fragment could not be rendered.

    The fragment API answers these with the flat ``{"error": ...}`` body the
    transition client expects instead of the standard envelope.
    """

    def __init__(self, page_id: str, correlation_id: str | None = None) -> None:
        super().__init__(
            resource_type="page",
            resource_id=page_id,
            message="Page not found",
            correlation_id=correlation_id,
        )
        self.page_id = page_id


class SystemException(APIException):
    """System error exception (500 Internal Server Error)."""

    def __init__(
        self,
        message: str = "An internal server error occurred",
        error_type: str = "general",
        correlation_id: str | None = None,
    ) -> None:
        code_mapping = {
            "template": ErrorCode.TEMPLATE_ERROR,
            "configuration": ErrorCode.CONFIGURATION_ERROR,
            "general": ErrorCode.INTERNAL_SERVER_ERROR,
        }

        super().__init__(
            code=code_mapping.get(error_type, ErrorCode.INTERNAL_SERVER_ERROR),
            message=message,
            category=ErrorCategory.SYSTEM,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            correlation_id=correlation_id,
        )


class ErrorLogger:
    """Structured error logging with correlation IDs."""

    @staticmethod
    def log_error(
        exception: APIException | Exception,
        request: Request | None = None,
        extra_context: dict[str, Any] | None = None,
    ) -> None:
        """Log error with structured information and correlation ID."""

        correlation_id = getattr(exception, "correlation_id", str(uuid.uuid4()))

        log_data = {
            "correlation_id": correlation_id,
            "exception_type": type(exception).__name__,
            "error_message": str(exception),
        }

        if isinstance(exception, APIException):
            log_data.update(
                {
                    "error_code": exception.code.value,
                    "category": exception.category.value,
                    "status_code": exception.status_code,
                }
            )

        if request is not None:
            log_data.update(
                {
                    "method": request.method,
                    "url": str(request.url),
                    "client_ip": request.client.host if request.client else None,
                }
            )

        if extra_context:
            log_data["extra_context"] = extra_context

        if isinstance(exception, APIException):
            if exception.category == ErrorCategory.SYSTEM:
                error_logger.error("System error occurred", extra=log_data)
            else:
                error_logger.info("Client error occurred", extra=log_data)
        elif isinstance(exception, StarletteHTTPException):
            error_logger.info("HTTP error occurred", extra=log_data)
        else:
            error_logger.error(
                "Unhandled exception occurred", extra=log_data, exc_info=exception
            )


def _code_for_status(status_code: int) -> tuple[ErrorCode, ErrorCategory]:
    if status_code == status.HTTP_404_NOT_FOUND:
        return ErrorCode.RESOURCE_NOT_FOUND, ErrorCategory.NOT_FOUND
    if 400 <= status_code < 500:
        return ErrorCode.VALIDATION_ERROR, ErrorCategory.VALIDATION
    return ErrorCode.INTERNAL_SERVER_ERROR, ErrorCategory.SYSTEM


def create_error_response(
    exception: APIException | StarletteHTTPException | Exception,
    request: Request | None = None,
    include_debug_info: bool = False,
) -> JSONResponse:
    """Create a standardized error response from any exception."""

    ErrorLogger.log_error(exception, request)

    if isinstance(exception, PageNotFoundException):
        return JSONResponse(
            status_code=exception.status_code,
            content={"error": exception.message},
            headers={CORRELATION_HEADER: exception.correlation_id},
        )

    if isinstance(exception, APIException):
        error_response = StandardErrorResponse.create(
            code=exception.code,
            message=exception.message,
            category=exception.category,
            status_code=exception.status_code,
            correlation_id=exception.correlation_id,
            details=exception.details,
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response.dict(),
            headers={CORRELATION_HEADER: exception.correlation_id},
        )

    correlation_id = str(uuid.uuid4())

    if isinstance(exception, StarletteHTTPException):
        code, category = _code_for_status(exception.status_code)
        error_response = StandardErrorResponse.create(
            code=code,
            message=str(exception.detail),
            category=category,
            status_code=exception.status_code,
            correlation_id=correlation_id,
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response.dict(),
            headers=exception.headers,
        )

    # In production, don't expose internal error details
    message = "An unexpected error occurred"
    details = None

    if include_debug_info:
        message = f"Unexpected error: {str(exception)}"
        details = ErrorDetail(
            field="exception_details",
            provided_value=type(exception).__name__,
            help_text="This detailed information is only available in debug mode",
        )

    error_response = StandardErrorResponse.create(
        code=ErrorCode.INTERNAL_SERVER_ERROR,
        message=message,
        category=ErrorCategory.SYSTEM,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        correlation_id=correlation_id,
        details=details,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.dict(),
        headers={CORRELATION_HEADER: correlation_id},
    )
