from .responses import (
    FragmentErrorResponse,
    FragmentResponse,
    HealthResponse,
    PageInfo,
    PageManifestResponse,
)

__all__ = [
    "FragmentErrorResponse",
    "FragmentResponse",
    "HealthResponse",
    "PageInfo",
    "PageManifestResponse",
]
