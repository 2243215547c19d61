"""
Smooth Transitions client

Page-transition controller for the demo site: a single-threaded state
machine that fetches page fragments, animates the swap, keeps history in
step and reflects the current page on indicators and navigation links.
"""

from transitions.context import NavigationContext, build_navigation_context
from transitions.controllers import ClickEvent, InputBindings, TransitionEngine
from transitions.exceptions import (
    ContentNotFound,
    InvalidNavigationRequest,
    NavigationError,
    TransportFailure,
)
from transitions.models import (
    Animating,
    Fragment,
    HistoryEntry,
    Idle,
    PageSet,
    TransitionKind,
)

__all__ = [
    "NavigationContext",
    "build_navigation_context",
    "ClickEvent",
    "InputBindings",
    "TransitionEngine",
    "ContentNotFound",
    "InvalidNavigationRequest",
    "NavigationError",
    "TransportFailure",
    "Animating",
    "Fragment",
    "HistoryEntry",
    "Idle",
    "PageSet",
    "TransitionKind",
]
