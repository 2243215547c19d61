from .animation_policy import (
    ACTIVE_MARKER,
    POLICIES,
    TRANSITION_MARKERS,
    TransitionPolicy,
    get_policy,
)
from .fragment_client import HttpFragmentProvider
from .history_service import SessionHistory
from .page_surface import PageContainer, PageElement
from .ui_sync_service import NavigationControl, UISync

__all__ = [
    "ACTIVE_MARKER",
    "POLICIES",
    "TRANSITION_MARKERS",
    "TransitionPolicy",
    "get_policy",
    "HttpFragmentProvider",
    "SessionHistory",
    "PageContainer",
    "PageElement",
    "NavigationControl",
    "UISync",
]
