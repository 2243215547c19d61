"""
Navigation Interfaces

Abstract interfaces for the collaborators of the transition engine. These
interfaces enable dependency injection and keep the engine independent of
the host environment (browser, test harness, headless renderer).
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from transitions.models import Fragment, HistoryEntry


class IFragmentProvider(ABC):
    """Interface for fetching renderable page fragments."""

    @abstractmethod
    async def fetch(self, page_id: str) -> Fragment:
        """
        Fetch the fragment for ``page_id``.

        Raises:
            ContentNotFound: if the provider has no such page
            TransportFailure: if the request itself failed
        """
        pass


class IHistoryAdapter(ABC):
    """Interface for the host's navigation history."""

    @abstractmethod
    def push(self, entry: HistoryEntry) -> None:
        """Push a new entry without reloading the page."""
        pass

    @abstractmethod
    def reload(self, entry: HistoryEntry) -> None:
        """Fully reload the document at ``entry.url``."""
        pass

    @abstractmethod
    def add_pop_listener(self, listener: Callable[[HistoryEntry], Any]) -> None:
        """Register a callback for back/forward navigation."""
        pass


class IPageSurface(ABC):
    """Interface for the visible page container."""

    @abstractmethod
    def create_page(self, html: str) -> Any:
        """Build a detached page element from fragment markup."""
        pass

    @abstractmethod
    def active_page(self) -> Any | None:
        """Return the currently active page element, if any."""
        pass

    @abstractmethod
    def attach(self, page: Any) -> None:
        """Attach a page element to the visible container."""
        pass

    @abstractmethod
    def reflow(self, page: Any) -> None:
        """Force a synchronous layout pass so the page's current markers are rendered."""
        pass

    @abstractmethod
    def remove(self, page: Any) -> None:
        """Detach a page element from the container."""
        pass

    @abstractmethod
    async def wait_for_transition(self, timeout: float) -> bool:
        """
        Wait until the running animation reports completion.

        Returns True when completion was signalled, False when ``timeout``
        elapsed first.
        """
        pass
