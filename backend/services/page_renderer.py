"""
Page Renderer Service

Renders page fragments and full documents from Jinja2 templates. Fragments
are what the transition client swaps in; full documents wrap a fragment in
the shared layout for direct navigation and the no-script fallback.
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from transitions.models import PageDefinition, PageSet

logger = logging.getLogger(__name__)


class PageRenderError(Exception):
    """Raised when a page or its layout cannot be rendered."""

    def __init__(self, page_id: str, message: str) -> None:
        super().__init__(message)
        self.page_id = page_id


class PageRenderer:
    """Stateless renderer for the pages of a page set."""

    def __init__(
        self,
        page_set: PageSet,
        templates_dir: str | Path,
        transition_kinds: list[str],
        default_transition: str,
        animation_duration_ms: int,
    ) -> None:
        self.page_set = page_set
        self.templates_dir = Path(templates_dir)
        self.transition_kinds = transition_kinds
        self.default_transition = default_transition
        self.animation_duration_ms = animation_duration_ms

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def has_page(self, page_id: str) -> bool:
        return self.page_set.index_of(page_id) is not None

    def render_fragment(self, page_id: str, active: bool = False) -> str:
        """
        Render the fragment of ``page_id``.

        ``active`` marks the page as the one showing, which only the full
        document does; swapped-in fragments are activated by the client.

        Raises:
            KeyError: if ``page_id`` is not in the page set
            PageRenderError: if the template is missing or fails to render
        """
        index = self.page_set.index_of(page_id)
        if index is None:
            raise KeyError(page_id)

        return self._render(
            f"pages/{page_id}.html",
            page_id,
            page=self.page_set[index],
            page_index=index,
            active=active,
            **self._shared_context(),
        )

    def render_document(self, index: int) -> str:
        """Render the complete document for the page at ``index``."""
        page: PageDefinition = self.page_set[index]
        content = self.render_fragment(page.page_id, active=True)

        return self._render(
            "layout.html",
            page.page_id,
            page=page,
            page_index=index,
            title=page.title,
            content=content,
            **self._shared_context(),
        )

    def _shared_context(self) -> dict[str, Any]:
        return {
            "pages": list(self.page_set),
            "transition_kinds": self.transition_kinds,
            "default_transition": self.default_transition,
            "animation_duration_ms": self.animation_duration_ms,
        }

    def _render(self, template_name: str, page_id: str, **context: Any) -> str:
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateError as e:
            logger.error(f"Failed to render {template_name} for page {page_id}: {e}")
            raise PageRenderError(page_id, f"Failed to render {template_name}: {e}") from e
