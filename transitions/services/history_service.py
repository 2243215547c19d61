"""
Session History

In-process implementation of the host's navigation history: pushed entries,
a cursor for back/forward, and pop listeners notified on every move.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from transitions.interfaces import IHistoryAdapter
from transitions.models import HistoryEntry

logger = logging.getLogger(__name__)


class SessionHistory(IHistoryAdapter):
    """Linear history stack with a cursor, mirroring a browser tab's history."""

    def __init__(self, initial_entry: HistoryEntry | None = None) -> None:
        self.entries: list[HistoryEntry] = []
        self.position = -1
        self.reloads: list[HistoryEntry] = []
        self._pop_listeners: list[Callable[[HistoryEntry], Any]] = []

        if initial_entry is not None:
            self.entries.append(initial_entry)
            self.position = 0

    @property
    def current(self) -> HistoryEntry | None:
        if self.position < 0:
            return None
        return self.entries[self.position]

    def push(self, entry: HistoryEntry) -> None:
        # Pushing discards any forward entries, as browsers do.
        del self.entries[self.position + 1:]
        self.entries.append(entry)
        self.position = len(self.entries) - 1
        logger.debug(f"History push: {entry.url} (page {entry.page_index})")

    def reload(self, entry: HistoryEntry) -> None:
        logger.info(f"Full reload requested for {entry.url}")
        self.reloads.append(entry)

    def add_pop_listener(self, listener: Callable[[HistoryEntry], Any]) -> None:
        self._pop_listeners.append(listener)

    def can_go_back(self) -> bool:
        return self.position > 0

    def can_go_forward(self) -> bool:
        return self.position < len(self.entries) - 1

    async def back(self) -> bool:
        """Move one entry back and notify pop listeners. Returns False at the start."""
        if not self.can_go_back():
            return False
        self.position -= 1
        await self._notify(self.entries[self.position])
        return True

    async def forward(self) -> bool:
        """Move one entry forward and notify pop listeners. Returns False at the end."""
        if not self.can_go_forward():
            return False
        self.position += 1
        await self._notify(self.entries[self.position])
        return True

    async def _notify(self, entry: HistoryEntry) -> None:
        for listener in list(self._pop_listeners):
            result = listener(entry)
            if inspect.isawaitable(result):
                await result
