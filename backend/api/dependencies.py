"""
API Dependencies
Dependency injection for FastAPI endpoints.
"""

import logging
from functools import lru_cache

from backend.config import ApplicationConfig, get_application_config
from backend.services.page_renderer import PageRenderer
from transitions.models import PageSet

logger = logging.getLogger(__name__)


def get_config() -> ApplicationConfig:
    """Get application configuration dependency."""
    return get_application_config()


@lru_cache
def get_page_set() -> PageSet:
    """Get the site's fixed page set."""
    return PageSet.from_config()


@lru_cache
def get_page_renderer() -> PageRenderer:
    """Get the page renderer dependency."""
    config = get_application_config()
    renderer = PageRenderer(
        page_set=get_page_set(),
        templates_dir=config.server.templates_dir,
        transition_kinds=config.transitions.kinds,
        default_transition=config.transitions.default_kind,
        animation_duration_ms=config.transitions.animation_duration_ms,
    )
    logger.info(f"Page renderer ready with templates from {config.server.templates_dir}")
    return renderer
