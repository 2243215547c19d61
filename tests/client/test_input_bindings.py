"""
InputBindings Tests

Tests for translating clicks, keys, swipes and the transition selector into
engine calls.
"""

from unittest.mock import AsyncMock

import pytest

from transitions.controllers import ClickEvent, InputBindings, swipe_direction
from transitions.controllers.input_bindings import NEXT, NONE, PREVIOUS
from transitions.models import Idle, TransitionKind


@pytest.fixture
def bindings(engine):
    return InputBindings(engine, min_swipe_distance=50)


class TestSwipeDirection:
    """Gesture classification."""

    @pytest.mark.parametrize(
        "start, end, expected",
        [
            ((300, 100), (200, 110), NEXT),
            ((100, 100), (260, 90), PREVIOUS),
            ((300, 100), (270, 100), NONE),
            ((300, 100), (250, 100), NONE),
            ((300, 100), (200, 300), NONE),
        ],
    )
    def test_classification(self, start, end, expected):
        assert swipe_direction(start, end, min_distance=50) == expected

    def test_threshold_is_configurable(self):
        assert swipe_direction((100, 0), (80, 0), min_distance=10) == NEXT


class TestInputBindings:
    """Routing of input events to the engine."""

    @pytest.mark.asyncio
    async def test_indicator_click_navigates_to_index(self, bindings, engine, history):
        assert await bindings.on_indicator_click(ClickEvent(page_index=3)) is True

        assert engine.state == Idle(3)
        assert history.current.url == "/interaction"

    @pytest.mark.asyncio
    async def test_indicator_click_on_current_page_is_noop(self, bindings, provider):
        assert await bindings.on_indicator_click(ClickEvent(page_index=0)) is False
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_indicator_without_index_is_ignored(self, bindings, provider):
        assert await bindings.on_indicator_click(ClickEvent(page_index=None)) is False
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_link_click_prevents_default_and_keeps_href(self, bindings, history):
        event = ClickEvent(page_index=1, href="/animations?from=welcome")

        assert await bindings.on_link_click(event) is True

        assert event.default_prevented is True
        assert history.current.url == "/animations?from=welcome"

    @pytest.mark.asyncio
    async def test_link_click_to_current_page_still_prevents_default(self, bindings):
        event = ClickEvent(page_index=0, href="/")

        assert await bindings.on_link_click(event) is False
        assert event.default_prevented is True

    @pytest.mark.asyncio
    async def test_keyboard_navigation(self, bindings, engine):
        assert await bindings.on_key("ArrowRight") is True
        assert engine.current_index == 1
        assert await bindings.on_key(" ") is True
        assert engine.current_index == 2
        assert await bindings.on_key("ArrowLeft") is True
        assert engine.current_index == 1
        assert await bindings.on_key("End") is True
        assert engine.current_index == 4
        assert await bindings.on_key("Home") is True
        assert engine.current_index == 0

    @pytest.mark.asyncio
    async def test_unbound_key_is_ignored(self, bindings, provider):
        assert await bindings.on_key("Enter") is False
        assert await bindings.on_key("ArrowLeft") is False
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_left_swipe_moves_forward(self, bindings, engine):
        engine.next_page = AsyncMock(wraps=engine.next_page)

        bindings.on_touch_start(300, 100)
        assert await bindings.on_touch_end(200, 110) is True

        engine.next_page.assert_awaited_once()
        assert engine.current_index == 1

    @pytest.mark.asyncio
    async def test_right_swipe_moves_back(self, bindings, engine):
        await engine.navigate(2)

        bindings.on_touch_start(50, 100)
        assert await bindings.on_touch_end(200, 100) is True

        assert engine.current_index == 1

    @pytest.mark.asyncio
    async def test_short_swipe_does_not_navigate(self, bindings, engine):
        engine.next_page = AsyncMock(wraps=engine.next_page)
        engine.previous_page = AsyncMock(wraps=engine.previous_page)

        bindings.on_touch_start(300, 100)
        assert await bindings.on_touch_end(270, 100) is False

        engine.next_page.assert_not_awaited()
        engine.previous_page.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_touch_end_without_start_is_ignored(self, bindings, provider):
        assert await bindings.on_touch_end(0, 0) is False

        bindings.on_touch_start(300, 100)
        await bindings.on_touch_end(100, 100)
        assert await bindings.on_touch_end(0, 100) is False
        assert provider.calls == ["animations"]

    def test_transition_select_updates_engine(self, bindings, engine):
        assert bindings.on_transition_select("flip") is TransitionKind.FLIP
        assert engine.transition_kind is TransitionKind.FLIP
