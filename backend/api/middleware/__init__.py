"""
API Middleware Package
Contains middleware for cross-cutting concerns.
"""

from .error_handling import ErrorHandlingMiddleware, setup_error_handling

__all__ = [
    "ErrorHandlingMiddleware",
    "setup_error_handling",
]
