"""
Navigation Exceptions

Exception classes for page navigation with structured error information,
so failures can be logged and reported to observers uniformly.
"""

from typing import Any


class NavigationError(Exception):
    """Base exception for all navigation-related errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ContentNotFound(NavigationError):
    """Raised when the fragment provider has no content for a page identifier."""

    def __init__(self, page_id: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Page '{page_id}' not found",
            error_code="CONTENT_NOT_FOUND",
            details={"page_id": page_id},
        )
        self.page_id = page_id


class TransportFailure(NavigationError):
    """Raised when fetching a fragment fails at the network level or times out."""

    def __init__(
        self,
        page_id: str,
        message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        details: dict[str, Any] = {"page_id": page_id}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            message or f"Failed to fetch page '{page_id}'",
            error_code="TRANSPORT_FAILURE",
            details=details,
        )
        self.page_id = page_id
        self.status_code = status_code


class InvalidNavigationRequest(NavigationError):
    """Raised for navigation arguments that can never be valid, e.g. a bad initial index."""

    def __init__(self, page_index: int, page_count: int) -> None:
        super().__init__(
            f"Page index {page_index} outside [0, {page_count - 1}]",
            error_code="INVALID_NAVIGATION_REQUEST",
            details={"page_index": page_index, "page_count": page_count},
        )
        self.page_index = page_index
