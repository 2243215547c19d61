"""Shared fixtures for the demo server and transition engine test suites."""

from __future__ import annotations

import asyncio
import os

# Must be set before the application modules load their configuration.
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest

from transitions.controllers import TransitionEngine
from transitions.exceptions import ContentNotFound, TransportFailure
from transitions.models import Fragment, HistoryEntry, PageSet
from transitions.services import PageContainer, PageElement, SessionHistory

FAST_ANIMATION = 0.01


def fragment_markup(page_id: str, index: int) -> str:
    return (
        f'<section class="page" data-page-id="{page_id}" data-page="{index}">'
        f"<h1>{page_id.title()}</h1></section>"
    )


class FakeFragmentProvider:
    """
    In-memory fragment provider.

    ``missing`` ids raise ContentNotFound, ``failing`` ids raise
    TransportFailure, and when ``gate`` is set every fetch waits on it.
    """

    def __init__(
        self,
        page_set: PageSet,
        missing: set[str] | None = None,
        failing: set[str] | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.page_set = page_set
        self.missing = set(missing or ())
        self.failing = set(failing or ())
        self.gate = gate
        self.calls: list[str] = []

    async def fetch(self, page_id: str) -> Fragment:
        self.calls.append(page_id)
        if self.gate is not None:
            await self.gate.wait()
        if page_id in self.failing:
            raise TransportFailure(page_id)
        index = self.page_set.index_of(page_id)
        if page_id in self.missing or index is None:
            raise ContentNotFound(page_id)
        return Fragment(html=fragment_markup(page_id, index), page_id=page_id)


@pytest.fixture
def page_set():
    return PageSet.from_config()


@pytest.fixture
def provider(page_set):
    return FakeFragmentProvider(page_set)


@pytest.fixture
def surface(page_set):
    """Container holding the server-rendered first page."""
    return PageContainer(PageElement.from_markup(fragment_markup(page_set[0].page_id, 0)))


@pytest.fixture
def history(page_set):
    return SessionHistory(HistoryEntry(page_index=0, url=page_set.url_for(0)))


@pytest.fixture
def engine(page_set, provider, history, surface):
    engine = TransitionEngine(
        page_set=page_set,
        fragment_provider=provider,
        history=history,
        surface=surface,
        animation_duration=FAST_ANIMATION,
    )
    history.add_pop_listener(engine.restore_from_history)
    return engine


@pytest.fixture
def make_provider(page_set):
    """Factory for providers with failing, missing or gated pages."""

    def _make(**kwargs) -> FakeFragmentProvider:
        return FakeFragmentProvider(page_set, **kwargs)

    return _make


@pytest.fixture
def make_engine(page_set, history, surface):
    """Factory for engines over the shared page set, history and surface."""

    def _make(provider: FakeFragmentProvider, **kwargs) -> TransitionEngine:
        kwargs.setdefault("animation_duration", FAST_ANIMATION)
        engine = TransitionEngine(
            page_set=page_set,
            fragment_provider=provider,
            history=history,
            surface=surface,
            **kwargs,
        )
        history.add_pop_listener(engine.restore_from_history)
        return engine

    return _make
