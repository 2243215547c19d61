"""
Fragment API Routes
Serve individual page fragments and the page manifest to the transition
client.
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.dependencies import get_config, get_page_renderer, get_page_set
from backend.api.error_handling import PageNotFoundException
from backend.api.models import (
    FragmentErrorResponse,
    FragmentResponse,
    PageInfo,
    PageManifestResponse,
)
from backend.config import ApplicationConfig
from backend.services.page_renderer import PageRenderError, PageRenderer
from transitions.models import PageSet

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/page/{page_id}",
    response_model=FragmentResponse,
    response_model_by_alias=True,
    responses={404: {"model": FragmentErrorResponse}},
)
async def get_page_fragment(
    page_id: str, renderer: PageRenderer = Depends(get_page_renderer)
) -> FragmentResponse:
    """Render the fragment of one page."""
    if not renderer.has_page(page_id):
        raise PageNotFoundException(page_id)

    try:
        html = renderer.render_fragment(page_id)
    except PageRenderError as e:
        logger.error(f"Fragment rendering failed for {page_id}: {e}")
        raise PageNotFoundException(page_id) from e

    return FragmentResponse(html=html, page_id=page_id)


@router.get("/pages", response_model=PageManifestResponse, response_model_by_alias=True)
async def get_page_manifest(
    page_set: PageSet = Depends(get_page_set),
    config: ApplicationConfig = Depends(get_config),
) -> PageManifestResponse:
    """List the pages in navigation order with the shared transition settings."""
    return PageManifestResponse(
        pages=[
            PageInfo(id=page.page_id, index=index, route=page.route, title=page.title)
            for index, page in enumerate(page_set)
        ],
        transition_kinds=config.transitions.kinds,
        default_transition=config.transitions.default_kind,
        animation_duration_ms=config.transitions.animation_duration_ms,
    )
