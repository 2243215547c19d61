"""
Transition Engine - Page Navigation State Machine

The single authority for which page is showing and for changing it safely.
A navigation fetches the target fragment, animates the swap on the page
surface, records the history entry and then notifies observers. At most one
navigation is in flight; every attempt ends back in ``Idle``.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from transitions.exceptions import (
    ContentNotFound,
    InvalidNavigationRequest,
    NavigationError,
    TransportFailure,
)
from transitions.interfaces import IFragmentProvider, IHistoryAdapter, IPageSurface
from transitions.models import (
    Animating,
    Fragment,
    HistoryEntry,
    Idle,
    NavigationState,
    PageSet,
    TransitionKind,
)
from transitions.services.animation_policy import (
    ACTIVE_MARKER,
    TRANSITION_MARKERS,
    TransitionPolicy,
    get_policy,
)

logger = logging.getLogger(__name__)

NavigationListener = Callable[[NavigationState], Any]
FailureListener = Callable[[NavigationError], Any]


class TransitionEngine:
    """
    Coordinates fetch, swap animation, history and UI notification for page
    navigation.

    States are ``Idle(index)`` and ``Animating(from_index, to_index)``. The
    state check and the move to ``Animating`` happen before the first
    suspension point, so a second request arriving while one is in flight is
    rejected rather than interleaved.
    """

    def __init__(
        self,
        page_set: PageSet,
        fragment_provider: IFragmentProvider,
        history: IHistoryAdapter,
        surface: IPageSurface,
        initial_index: int = 0,
        transition_kind: TransitionKind | str = TransitionKind.SLIDE,
        animation_duration: float = 0.6,
        fetch_timeout: float | None = 10.0,
    ) -> None:
        """
        Args:
            page_set: The fixed, ordered pages of the site
            fragment_provider: Source of page markup
            history: Host navigation history
            surface: Visible page container
            initial_index: Index of the page the document was loaded with
            transition_kind: Animation style for swaps
            animation_duration: Fallback wait for the animation, in seconds
            fetch_timeout: Upper bound on one fragment fetch, in seconds (None disables it)
        """
        if not page_set.is_valid_index(initial_index):
            raise InvalidNavigationRequest(initial_index, len(page_set))

        self._page_set = page_set
        self._provider = fragment_provider
        self._history = history
        self._surface = surface
        self._transition_kind = TransitionKind.from_value(transition_kind)
        self._animation_duration = animation_duration
        self._fetch_timeout = fetch_timeout

        self._state: NavigationState = Idle(initial_index)
        self._pending_restore: HistoryEntry | None = None
        self._navigation_listeners: list[NavigationListener] = []
        self._failure_listeners: list[FailureListener] = []

        logger.debug(f"TransitionEngine created on page {initial_index}")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def is_animating(self) -> bool:
        return self._state.is_animating

    @property
    def page_set(self) -> PageSet:
        return self._page_set

    @property
    def transition_kind(self) -> TransitionKind:
        return self._transition_kind

    def set_transition_kind(self, kind: TransitionKind | str) -> TransitionKind:
        """Select the animation style used by the next navigation."""
        self._transition_kind = TransitionKind.from_value(kind)
        logger.debug(f"Transition kind set to {self._transition_kind.value}")
        return self._transition_kind

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_navigation_listener(self, listener: NavigationListener) -> None:
        """Called with the new state after every completed navigation."""
        self._navigation_listeners.append(listener)

    def add_failure_listener(self, listener: FailureListener) -> None:
        """Called with the error of every abandoned navigation."""
        self._failure_listeners.append(listener)

    def refresh(self) -> None:
        """Notify navigation listeners of the current state (used on initial load)."""
        self._notify(self._navigation_listeners, self._state)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def can_navigate(self, target_index: int) -> bool:
        """True when a navigation to ``target_index`` would pass the guard."""
        return (
            not self._state.is_animating
            and self._page_set.is_valid_index(target_index)
            and target_index != self._state.current_index
        )

    async def navigate(
        self, target_index: int, url: str | None = None, *, push_history: bool = True
    ) -> bool:
        """
        Navigate to ``target_index``.

        Requests that are rejected by the guard (already animating, same page,
        out of range) are no-ops. Returns True only when the transition
        completed.
        """
        if not self.can_navigate(target_index):
            logger.debug(
                f"Navigation to {target_index} ignored in state {self._state}"
            )
            return False

        completed = await self._run_transition(target_index, url, push_history)
        await self._apply_pending_restore()
        return completed

    async def go_to_page(self, index: int) -> bool:
        """Navigate to ``index`` using its canonical URL."""
        if not self._page_set.is_valid_index(index):
            logger.debug(f"go_to_page({index}) outside page set, ignored")
            return False
        return await self.navigate(index, self._page_set.url_for(index))

    async def next_page(self) -> bool:
        return await self.go_to_page(self.current_index + 1)

    async def previous_page(self) -> bool:
        return await self.go_to_page(self.current_index - 1)

    async def first_page(self) -> bool:
        return await self.go_to_page(0)

    async def last_page(self) -> bool:
        return await self.go_to_page(self._page_set.last_index)

    async def restore_from_history(self, entry: HistoryEntry) -> bool:
        """
        Resynchronize to a back/forward history entry.

        Replays the normal fetch and swap without pushing a new entry. If the
        replay fails the page is fully reloaded at the entry's URL. While a
        navigation is in flight the entry is kept and applied once it settles.
        """
        if not self._page_set.is_valid_index(entry.page_index):
            logger.warning(f"Ignoring history entry with invalid page index: {entry}")
            return False

        if self._state.is_animating:
            logger.debug(f"Deferring history restore to page {entry.page_index}")
            self._pending_restore = entry
            return False

        if entry.page_index == self._state.current_index:
            return False

        completed = await self.navigate(entry.page_index, entry.url, push_history=False)
        if not completed and self._state.current_index != entry.page_index:
            logger.info(f"History replay failed, reloading {entry.url}")
            self._history.reload(entry)
            self._state = Idle(entry.page_index)
            self._notify(self._navigation_listeners, self._state)
        return completed

    async def _apply_pending_restore(self) -> None:
        if self._pending_restore is None or self._state.is_animating:
            return
        entry, self._pending_restore = self._pending_restore, None
        await self.restore_from_history(entry)

    async def _run_transition(
        self, target_index: int, url: str | None, push_history: bool
    ) -> bool:
        from_index = self._state.current_index
        self._state = Animating(from_index, target_index)
        page = self._page_set[target_index]
        url = url or page.route
        completed = False

        try:
            fragment = await self._fetch(page.page_id)
            await self._swap(fragment, from_index, target_index)
            if push_history and self._pending_restore is None:
                self._history.push(HistoryEntry(page_index=target_index, url=url))
            elif push_history:
                # A back/forward arrived mid-flight; the history cursor already
                # points at the entry the pending restore will show.
                logger.debug(f"Skipping history push for {url}, restore pending")
            self._state = Idle(target_index)
            completed = True
        except (ContentNotFound, TransportFailure) as e:
            logger.warning(f"Navigation to {page.page_id} abandoned: {e.message}")
            self._notify(self._failure_listeners, e)
        except Exception as e:
            logger.error(
                f"Unexpected error navigating to {page.page_id}: {e}", exc_info=True
            )
            raise
        finally:
            if not completed:
                self._state = Idle(from_index)

        if completed:
            logger.info(f"Navigated from page {from_index} to {target_index} ({url})")
            self._notify(self._navigation_listeners, self._state)
        return completed

    async def _fetch(self, page_id: str) -> Fragment:
        try:
            if self._fetch_timeout is None:
                return await self._provider.fetch(page_id)
            return await asyncio.wait_for(self._provider.fetch(page_id), self._fetch_timeout)
        except asyncio.TimeoutError as e:
            raise TransportFailure(
                page_id, f"Fetching page '{page_id}' exceeded {self._fetch_timeout}s"
            ) from e

    async def _swap(self, fragment: Fragment, from_index: int, to_index: int) -> None:
        """Animate the fragment in and the active page out."""
        forward = to_index > from_index
        policy: TransitionPolicy = get_policy(self._transition_kind)

        new_page = self._surface.create_page(fragment.html)
        new_page.remove_classes(ACTIVE_MARKER)
        new_page.add_classes(*policy.entry_markers(forward))

        outgoing = self._surface.active_page()
        self._surface.attach(new_page)
        # The entry state must be rendered before the exit/clear below.
        self._surface.reflow(new_page)

        if outgoing is not None:
            outgoing.add_classes(*policy.exit_markers(forward))
            new_page.remove_classes(*policy.entry_markers(forward))
        else:
            new_page.add_classes(ACTIVE_MARKER)

        await self._surface.wait_for_transition(self._animation_duration)

        if outgoing is not None:
            self._surface.remove(outgoing)
        new_page.add_classes(ACTIVE_MARKER)
        new_page.remove_classes(*TRANSITION_MARKERS)

    @staticmethod
    def _notify(listeners: list[Callable[[Any], Any]], payload: Any) -> None:
        for listener in list(listeners):
            try:
                listener(payload)
            except Exception as e:
                logger.error(f"Navigation listener {listener!r} failed: {e}", exc_info=True)
