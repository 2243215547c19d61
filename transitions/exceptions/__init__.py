from .navigation import (
    ContentNotFound,
    InvalidNavigationRequest,
    NavigationError,
    TransportFailure,
)

__all__ = [
    "NavigationError",
    "ContentNotFound",
    "TransportFailure",
    "InvalidNavigationRequest",
]
