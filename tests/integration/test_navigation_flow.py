"""
End-to-End Navigation Tests

Drives a full navigation context against the real demo server app through
httpx's ASGI transport: fragments come from the FastAPI routes, swaps happen
on the in-memory page container, and UI sync follows every transition.
"""

import httpx
import pytest

from backend.api.main import create_app
from transitions import (
    ClickEvent,
    ContentNotFound,
    Idle,
    PageSet,
    TransitionKind,
    build_navigation_context,
)
from transitions.services import HttpFragmentProvider, PageContainer, PageElement

pytestmark = pytest.mark.integration


def _loaded_surface(html: str) -> PageContainer:
    return PageContainer(PageElement.from_markup(html))


class TestNavigationFlow:
    """Server-backed navigation through the public context API."""

    @pytest.mark.asyncio
    async def test_provider_fetches_server_fragments(self):
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=create_app()), base_url="http://testserver"
        ) as client:
            provider = HttpFragmentProvider(client=client)

            fragment = await provider.fetch("interaction")
            assert fragment.page_id == "interaction"
            assert 'data-page-id="interaction"' in fragment.html

            with pytest.raises(ContentNotFound, match="Page not found"):
                await provider.fetch("nonexistent")

    @pytest.mark.asyncio
    async def test_full_session(self):
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=create_app()), base_url="http://testserver"
        ) as client:
            provider = HttpFragmentProvider(client=client)
            initial = await provider.fetch("welcome")
            context = build_navigation_context(
                provider,
                surface=_loaded_surface(initial.html),
                transition_kind="fade",
                animation_duration=0.01,
            )
            engine, bindings, ui_sync = context.engine, context.bindings, context.ui_sync

            assert ui_sync.active_indicator_indices() == [0]
            assert engine.transition_kind is TransitionKind.FADE

            assert await bindings.on_key("ArrowRight") is True
            assert await bindings.on_indicator_click(ClickEvent(page_index=3)) is True
            assert engine.state == Idle(3)
            assert ui_sync.active_indicator_indices() == [3]
            assert ui_sync.active_nav_link_indices() == [3]
            assert context.surface.children[0].page_id == "interaction"

            bindings.on_touch_start(300, 120)
            assert await bindings.on_touch_end(120, 130) is True
            assert engine.current_index == 4

            assert [entry.url for entry in context.history.entries] == [
                "/",
                "/animations",
                "/interaction",
                "/ready",
            ]

            assert await context.history.back() is True
            assert engine.state == Idle(3)
            assert ui_sync.active_indicator_indices() == [3]
            assert len(context.history.entries) == 4

    @pytest.mark.asyncio
    async def test_unknown_page_in_page_set_leaves_state_unchanged(self):
        page_set = PageSet.from_config(
            [
                {"id": "welcome", "route": "/", "title": "Welcome"},
                {"id": "retired", "route": "/retired", "title": "Retired"},
            ]
        )
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=create_app()), base_url="http://testserver"
        ) as client:
            context = build_navigation_context(
                HttpFragmentProvider(client=client),
                page_set=page_set,
                animation_duration=0.01,
            )
            failures = []
            context.engine.add_failure_listener(failures.append)

            assert await context.engine.go_to_page(1) is False

            assert context.engine.state == Idle(0)
            assert context.ui_sync.active_indicator_indices() == [0]
            assert isinstance(failures[0], ContentNotFound)
