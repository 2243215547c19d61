from .navigation_models import (
    Animating,
    Fragment,
    HistoryEntry,
    Idle,
    NavigationState,
    PageDefinition,
    PageSet,
    TransitionKind,
)

__all__ = [
    "Animating",
    "Fragment",
    "HistoryEntry",
    "Idle",
    "NavigationState",
    "PageDefinition",
    "PageSet",
    "TransitionKind",
]
