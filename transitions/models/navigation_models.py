"""
Navigation Data Models

Immutable value types for the page set, the engine's navigation state and
history entries.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from config import PAGES


class TransitionKind(str, Enum):
    """Animation style used for a page swap."""

    SLIDE = "slide"
    FADE = "fade"
    ZOOM = "zoom"
    ROTATE = "rotate"
    FLIP = "flip"
    CUBE = "cube"

    @classmethod
    def from_value(cls, value: "TransitionKind | str") -> "TransitionKind":
        """Coerce a selector value into a kind; unknown values raise ValueError."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True)
class PageDefinition:
    """A single page of the site."""

    page_id: str
    route: str
    title: str
    label: str = ""


class PageSet:
    """
    Ordered, fixed set of pages.

    The position of a page in the set is its index; identifiers are unique.
    """

    def __init__(self, pages: Sequence[PageDefinition]) -> None:
        if not pages:
            raise ValueError("PageSet requires at least one page")

        page_ids = [page.page_id for page in pages]
        if len(set(page_ids)) != len(page_ids):
            raise ValueError(f"Duplicate page identifiers in {page_ids}")

        self._pages: tuple[PageDefinition, ...] = tuple(pages)
        self._index_by_id = {page.page_id: index for index, page in enumerate(self._pages)}

    @classmethod
    def from_config(cls, pages: Sequence[dict[str, Any]] | None = None) -> "PageSet":
        """Build the page set from the configured page definitions."""
        source = PAGES if pages is None else pages
        return cls(
            [
                PageDefinition(
                    page_id=page["id"],
                    route=page["route"],
                    title=page["title"],
                    label=page.get("label", page["id"].title()),
                )
                for page in source
            ]
        )

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[PageDefinition]:
        return iter(self._pages)

    def __getitem__(self, index: int) -> PageDefinition:
        if not self.is_valid_index(index):
            raise IndexError(f"Page index {index} out of range")
        return self._pages[index]

    @property
    def page_ids(self) -> list[str]:
        return [page.page_id for page in self._pages]

    @property
    def last_index(self) -> int:
        return len(self._pages) - 1

    def is_valid_index(self, index: int) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._pages)

    def index_of(self, page_id: str) -> int | None:
        """Return the index of ``page_id``, or None when it is not in the set."""
        return self._index_by_id.get(page_id)

    def url_for(self, index: int) -> str:
        """Canonical URL of the page at ``index``."""
        return self[index].route


@dataclass(frozen=True)
class Idle:
    """No navigation in flight; ``index`` is showing."""

    index: int

    @property
    def current_index(self) -> int:
        return self.index

    @property
    def is_animating(self) -> bool:
        return False


@dataclass(frozen=True)
class Animating:
    """A navigation from ``from_index`` to ``to_index`` is in flight."""

    from_index: int
    to_index: int

    @property
    def current_index(self) -> int:
        # The outgoing page stays current until the swap completes.
        return self.from_index

    @property
    def is_animating(self) -> bool:
        return True

    @property
    def is_forward(self) -> bool:
        return self.to_index > self.from_index


NavigationState = Idle | Animating


@dataclass(frozen=True)
class HistoryEntry:
    """State attached to a history entry, used to resync after back/forward."""

    page_index: int
    url: str

    def to_state(self) -> dict[str, Any]:
        """Serialize as the opaque history state object."""
        return {"pageIndex": self.page_index, "url": self.url}

    @classmethod
    def from_state(cls, state: dict[str, Any] | None) -> "HistoryEntry | None":
        """Parse a history state object; entries without a page index yield None."""
        if not state or state.get("pageIndex") is None:
            return None
        return cls(page_index=int(state["pageIndex"]), url=state.get("url", ""))


@dataclass(frozen=True)
class Fragment:
    """Renderable markup for one page, as returned by a fragment provider."""

    html: str
    page_id: str
