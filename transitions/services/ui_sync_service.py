"""
UI Sync Service

Keeps the page indicators and navigation links consistent with the
engine's navigation state. Both are recomputed from the state on every
sync, never patched incrementally.
"""

import logging
from dataclasses import dataclass

from transitions.models import NavigationState, PageSet

from .animation_policy import ACTIVE_MARKER

logger = logging.getLogger(__name__)


@dataclass
class NavigationControl:
    """An indicator dot or navigation link bound to a page index."""

    page_index: int
    href: str | None = None
    active: bool = False

    @property
    def classes(self) -> list[str]:
        return [ACTIVE_MARKER] if self.active else []


class UISync:
    """Reflects the current page index onto indicators and nav links."""

    def __init__(
        self,
        indicators: list[NavigationControl],
        nav_links: list[NavigationControl],
    ) -> None:
        self.indicators = indicators
        self.nav_links = nav_links
        self.sync_count = 0

    @classmethod
    def for_page_set(cls, page_set: PageSet) -> "UISync":
        """One indicator dot and one nav link per page, in page order."""
        return cls(
            indicators=[NavigationControl(page_index=index) for index in range(len(page_set))],
            nav_links=[
                NavigationControl(page_index=index, href=page.route)
                for index, page in enumerate(page_set)
            ],
        )

    def sync(self, state: NavigationState) -> None:
        """Recompute both control groups from ``state``."""
        current = state.current_index
        self._update(self.indicators, current)
        self._update(self.nav_links, current)
        self.sync_count += 1
        logger.debug(f"UI synced to page {current}")

    @staticmethod
    def _update(controls: list[NavigationControl], current: int) -> None:
        # Position in the group decides, matching the order the layout renders them in.
        for position, control in enumerate(controls):
            control.active = position == current

    def active_indicator_indices(self) -> list[int]:
        return [position for position, control in enumerate(self.indicators) if control.active]

    def active_nav_link_indices(self) -> list[int]:
        return [position for position, control in enumerate(self.nav_links) if control.active]
