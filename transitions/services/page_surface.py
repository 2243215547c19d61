"""
Page Surface

A headless model of the visible page container: page elements carry their
markup and marker classes, the container keeps them in document order and
exposes the layout and animation hooks the transition engine drives.
"""

import asyncio
import logging
from html.parser import HTMLParser

from transitions.interfaces import IPageSurface

from .animation_policy import ACTIVE_MARKER

logger = logging.getLogger(__name__)


class _FirstElementParser(HTMLParser):
    """Collects the tag and attributes of the first element in a fragment."""

    def __init__(self) -> None:
        super().__init__()
        self.tag: str | None = None
        self.attrs: dict[str, str] = {}

    def handle_starttag(self, tag, attrs):
        if self.tag is None:
            self.tag = tag
            self.attrs = {name: value or "" for name, value in attrs}


class PageElement:
    """One page in the container, identified by its markup and marker classes."""

    def __init__(
        self,
        html: str,
        tag: str = "div",
        classes: list[str] | None = None,
        attributes: dict[str, str] | None = None,
    ) -> None:
        self.html = html
        self.tag = tag
        self.classes: list[str] = list(classes or [])
        self.attributes = dict(attributes or {})

    @classmethod
    def from_markup(cls, html: str) -> "PageElement":
        """Build a detached element from the first element of ``html``."""
        parser = _FirstElementParser()
        parser.feed(html)
        parser.close()

        if parser.tag is None:
            return cls(html)

        attributes = dict(parser.attrs)
        classes = attributes.pop("class", "").split()
        return cls(html, tag=parser.tag, classes=classes, attributes=attributes)

    @property
    def page_id(self) -> str | None:
        return self.attributes.get("data-page-id")

    @property
    def is_active(self) -> bool:
        return ACTIVE_MARKER in self.classes

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_classes(self, *names: str) -> None:
        for name in names:
            if name not in self.classes:
                self.classes.append(name)

    def remove_classes(self, *names: str) -> None:
        self.classes = [name for name in self.classes if name not in names]

    def __repr__(self) -> str:
        return f"PageElement(tag={self.tag!r}, page_id={self.page_id!r}, classes={self.classes!r})"


class PageContainer(IPageSurface):
    """
    In-memory page container.

    ``reflow_log`` records the marker state of every forced layout pass so the
    entry state of an incoming page can be observed. ``signal_transition_end``
    is the animation-finished signal a host forwards from its renderer.
    """

    def __init__(self, initial_page: PageElement | None = None) -> None:
        self.children: list[PageElement] = []
        self.reflow_log: list[tuple[str, ...]] = []
        self._transition_done = asyncio.Event()

        if initial_page is not None:
            initial_page.add_classes(ACTIVE_MARKER)
            self.children.append(initial_page)

    def create_page(self, html: str) -> PageElement:
        return PageElement.from_markup(html)

    def active_page(self) -> PageElement | None:
        for child in self.children:
            if child.is_active:
                return child
        return None

    def attach(self, page: PageElement) -> None:
        if page not in self.children:
            self.children.append(page)

    def reflow(self, page: PageElement) -> None:
        self.reflow_log.append(tuple(page.classes))

    def remove(self, page: PageElement) -> None:
        if page in self.children:
            self.children.remove(page)

    def signal_transition_end(self) -> None:
        """Report that the running animation has finished."""
        self._transition_done.set()

    async def wait_for_transition(self, timeout: float) -> bool:
        # Only a signal raised during this wait counts; drop late ones.
        self._transition_done.clear()
        try:
            await asyncio.wait_for(self._transition_done.wait(), timeout)
            return True
        except asyncio.TimeoutError:
            logger.debug(f"No animation-finished signal within {timeout:.3f}s")
            return False
        finally:
            self._transition_done.clear()
