"""
Full-Page Routes
One route per page rendering the complete document, for direct navigation
and clients without the transition script.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from backend.api.dependencies import get_page_renderer, get_page_set
from backend.api.error_handling import SystemException
from backend.services.page_renderer import PageRenderError, PageRenderer

logger = logging.getLogger(__name__)


def _document_endpoint(index: int):
    async def render_page(renderer: PageRenderer = Depends(get_page_renderer)) -> HTMLResponse:
        try:
            return HTMLResponse(renderer.render_document(index))
        except PageRenderError as e:
            raise SystemException(
                message=f"Page '{e.page_id}' could not be rendered",
                error_type="template",
            ) from e

    render_page.__name__ = f"render_page_{index}"
    return render_page


def create_pages_router() -> APIRouter:
    """Build a router with one GET route per page of the page set."""
    router = APIRouter()
    for index, page in enumerate(get_page_set()):
        router.add_api_route(
            page.route,
            _document_endpoint(index),
            methods=["GET"],
            response_class=HTMLResponse,
            name=f"page_{page.page_id}",
            summary=page.title,
        )
    return router
