"""
NavigationContext Tests

Scenario tests for a wired session: engine, UI sync, history and input
bindings built by the composition root around an in-memory provider.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from transitions import HistoryEntry, Idle, TransitionKind, build_navigation_context
from transitions.services import PageContainer, PageElement, SessionHistory


@pytest.fixture
def make_context(page_set, surface):
    def _make(provider, **kwargs):
        kwargs.setdefault("animation_duration", 0.01)
        return build_navigation_context(provider, page_set=page_set, surface=surface, **kwargs)

    return _make


class TestNavigationContext:
    """Behaviour of a freshly built session."""

    def test_initial_load_syncs_controls(self, make_context, provider):
        context = make_context(provider)

        assert context.engine.state == Idle(0)
        assert context.ui_sync.active_indicator_indices() == [0]
        assert context.ui_sync.active_nav_link_indices() == [0]
        assert context.history.current == HistoryEntry(0, "/")

    def test_initial_index_from_document(self, make_context, provider):
        context = make_context(provider, initial_index=3, transition_kind="zoom")

        assert context.engine.current_index == 3
        assert context.engine.transition_kind is TransitionKind.ZOOM
        assert context.ui_sync.active_indicator_indices() == [3]
        assert context.history.current == HistoryEntry(3, "/interaction")

    def test_custom_history_and_swipe_threshold(self, make_context, provider):
        history = SessionHistory()
        context = make_context(provider, history=history, min_swipe_distance=120)

        assert context.history is history
        assert context.bindings.min_swipe_distance == 120

    @pytest.mark.asyncio
    async def test_go_to_page_success(self, make_context, provider):
        context = make_context(provider)

        assert await context.engine.go_to_page(2) is True

        assert context.engine.state == Idle(2)
        assert context.ui_sync.active_indicator_indices() == [2]
        assert context.history.entries[1:] == [HistoryEntry(page_index=2, url="/effects")]

    @pytest.mark.asyncio
    async def test_go_to_page_not_found(self, make_context, make_provider):
        context = make_context(make_provider(missing={"ready"}))

        assert await context.engine.go_to_page(4) is False

        assert context.engine.state == Idle(0)
        assert context.ui_sync.active_indicator_indices() == [0]
        assert len(context.history.entries) == 1

    @pytest.mark.asyncio
    async def test_immediate_double_navigation_completes_once(self, make_context, provider):
        context = make_context(provider)

        results = await asyncio.gather(
            context.engine.go_to_page(1), context.engine.go_to_page(3)
        )

        assert sorted(results) == [False, True]
        assert len(context.history.entries) == 2
        assert context.ui_sync.active_indicator_indices() == [context.engine.current_index]

    @pytest.mark.asyncio
    async def test_round_trip_restores_state_and_controls(self, make_context, provider):
        context = make_context(provider)

        await context.engine.go_to_page(2)
        assert await context.history.back() is True

        assert context.engine.state == Idle(0)
        assert context.ui_sync.active_indicator_indices() == [0]
        assert context.ui_sync.active_nav_link_indices() == [0]
        assert context.surface.children[0].page_id == "welcome"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "end, expected",
        [((220, 105), 2), ((380, 105), 0)],
    )
    async def test_swipe_from_page_one(self, make_context, provider, end, expected):
        context = make_context(provider, initial_index=1)
        navigate = AsyncMock(wraps=context.engine.navigate)
        context.engine.navigate = navigate

        context.bindings.on_touch_start(300, 100)
        assert await context.bindings.on_touch_end(*end) is True

        assert navigate.await_args.args[0] == expected
        assert context.engine.current_index == expected

    @pytest.mark.asyncio
    async def test_surface_error_restores_idle_and_propagates(self, provider):
        class BrokenContainer(PageContainer):
            def reflow(self, page: PageElement) -> None:
                raise RuntimeError("layout failed")

        context = build_navigation_context(
            provider, surface=BrokenContainer(), animation_duration=0.01
        )

        with pytest.raises(RuntimeError, match="layout failed"):
            await context.engine.go_to_page(1)

        assert context.engine.state == Idle(0)
        assert len(context.history.entries) == 1
