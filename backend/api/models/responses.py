"""
API Response Models
Response formats for the fragment API, the page manifest and health checks.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class FragmentResponse(BaseModel):
    """
    Renderable markup for one page.

    Example:
        {"html": "<section class=\"page\" ...>...</section>", "pageId": "effects"}
    """

    html: str = Field(..., description="Page fragment markup")
    page_id: str = Field(..., description="Page identifier", alias="pageId")

    class Config:
        populate_by_name = True


class FragmentErrorResponse(BaseModel):
    """Error body of the fragment API."""

    error: str = Field(..., description="Human-readable error message")


class PageInfo(BaseModel):
    """One entry of the page manifest."""

    id: str = Field(..., description="Page identifier")
    index: int = Field(..., ge=0, description="Position in the page set")
    route: str = Field(..., description="Canonical URL")
    title: str = Field(..., description="Document title")


class PageManifestResponse(BaseModel):
    """Page set and transition settings shared with clients."""

    pages: list[PageInfo] = Field(..., description="Pages in navigation order")
    transition_kinds: list[str] = Field(..., alias="transitionKinds")
    default_transition: str = Field(..., alias="defaultTransition")
    animation_duration_ms: int = Field(..., alias="animationDurationMs")

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """Basic health check payload."""

    status: str = Field("healthy", description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
