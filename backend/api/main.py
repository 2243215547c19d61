"""
FastAPI Main Application
Serves the demo site: full-page routes, the fragment API used by the
transition client, and static assets.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from backend.api.middleware import setup_error_handling
from backend.api.models import HealthResponse
from backend.api.routes import fragments, pages
from backend.config import ApplicationConfig, get_application_config

logger = logging.getLogger(__name__)


def create_app(config: ApplicationConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or get_application_config()

    app = FastAPI(
        title=f"{config.app_name} API",
        description="Multi-page demo site with client-side animated page transitions",
        version=config.app_version,
        docs_url="/api/docs",
        redoc_url=None,
    )

    setup_error_handling(app, include_debug_info=config.debug)

    app.mount("/static", StaticFiles(directory=config.server.static_dir), name="static")

    app.include_router(fragments.router, prefix="/api", tags=["fragments"])
    app.include_router(pages.create_pages_router(), tags=["pages"])

    @app.get("/health", response_model=HealthResponse)
    async def basic_health_check() -> HealthResponse:
        """Basic health check endpoint - no dependencies."""
        return HealthResponse(
            status="healthy",
            service=config.app_name,
            version=config.app_version,
            timestamp=datetime.now(timezone.utc),
        )

    logger.info(
        f"{config.app_name} app created ({config.environment.value}, "
        f"static={config.server.static_dir})"
    )
    return app


app = create_app()
