"""
Navigation Context

Composition root for one browsing session: builds the engine and its
collaborators once and wires UI sync and history notifications to it.
"""

import logging
from dataclasses import dataclass

from config import TRANSITION_SETTINGS, Config

from transitions.controllers import InputBindings, TransitionEngine
from transitions.interfaces import IFragmentProvider, IHistoryAdapter, IPageSurface
from transitions.models import HistoryEntry, PageSet, TransitionKind
from transitions.services import PageContainer, SessionHistory, UISync

logger = logging.getLogger(__name__)


@dataclass
class NavigationContext:
    """Everything one session needs, owned by whoever built it."""

    page_set: PageSet
    engine: TransitionEngine
    bindings: InputBindings
    ui_sync: UISync
    history: IHistoryAdapter
    surface: IPageSurface


def build_navigation_context(
    fragment_provider: IFragmentProvider,
    initial_index: int = 0,
    page_set: PageSet | None = None,
    surface: IPageSurface | None = None,
    history: IHistoryAdapter | None = None,
    transition_kind: TransitionKind | str | None = None,
    animation_duration: float | None = None,
    fetch_timeout: float | None = None,
    min_swipe_distance: float | None = None,
) -> NavigationContext:
    """
    Build and wire a navigation context.

    Unspecified settings come from the shared configuration, so the engine's
    animation wait matches the duration the stylesheet is rendered with.
    """
    page_set = page_set or PageSet.from_config()
    surface = surface or PageContainer()
    if history is None:
        history = SessionHistory(
            HistoryEntry(page_index=initial_index, url=page_set.url_for(initial_index))
        )

    engine = TransitionEngine(
        page_set=page_set,
        fragment_provider=fragment_provider,
        history=history,
        surface=surface,
        initial_index=initial_index,
        transition_kind=transition_kind or Config.get_transition_kind(),
        animation_duration=(
            animation_duration
            if animation_duration is not None
            else Config.get_animation_duration_ms() / 1000.0
        ),
        fetch_timeout=fetch_timeout if fetch_timeout is not None else Config.get_fetch_timeout(),
    )

    ui_sync = UISync.for_page_set(page_set)
    engine.add_navigation_listener(ui_sync.sync)
    history.add_pop_listener(engine.restore_from_history)

    bindings = InputBindings(
        engine,
        min_swipe_distance=(
            min_swipe_distance
            if min_swipe_distance is not None
            else TRANSITION_SETTINGS["min_swipe_distance"]
        ),
    )

    # Indicators and nav links reflect the loaded page before any navigation.
    engine.refresh()
    logger.info(f"Navigation context ready on page {initial_index}")

    return NavigationContext(
        page_set=page_set,
        engine=engine,
        bindings=bindings,
        ui_sync=ui_sync,
        history=history,
        surface=surface,
    )
