"""
Input Bindings

Translates pointer, keyboard and touch input into transition engine calls.
The only state kept here is the start point of the current touch.
"""

import logging
from dataclasses import dataclass

from transitions.models import TransitionKind

from .transition_engine import TransitionEngine

logger = logging.getLogger(__name__)

NEXT = 1
PREVIOUS = -1
NONE = 0

KEY_ACTIONS = {
    "ArrowRight": "next",
    " ": "next",
    "ArrowLeft": "previous",
    "Home": "first",
    "End": "last",
}


@dataclass
class ClickEvent:
    """A click on an indicator dot or a link carrying a ``data-page`` index."""

    page_index: int | None
    href: str | None = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


def swipe_direction(
    start: tuple[float, float], end: tuple[float, float], min_distance: float = 50
) -> int:
    """
    Classify a touch gesture.

    Returns NEXT for a leftward horizontal swipe, PREVIOUS for a rightward
    one and NONE for short or vertical-dominant gestures.
    """
    delta_x = start[0] - end[0]
    delta_y = start[1] - end[1]

    if abs(delta_x) <= abs(delta_y):
        return NONE
    if delta_x > min_distance:
        return NEXT
    if delta_x < -min_distance:
        return PREVIOUS
    return NONE


class InputBindings:
    """Routes input events to a transition engine."""

    def __init__(self, engine: TransitionEngine, min_swipe_distance: float = 50) -> None:
        self._engine = engine
        self.min_swipe_distance = min_swipe_distance
        self._touch_start: tuple[float, float] | None = None

    async def on_indicator_click(self, event: ClickEvent) -> bool:
        if event.page_index is None:
            return False
        return await self._engine.go_to_page(event.page_index)

    async def on_link_click(self, event: ClickEvent) -> bool:
        """Nav links and in-page transition links navigate in place of the browser."""
        event.prevent_default()
        if event.page_index is None:
            return False
        return await self._engine.navigate(event.page_index, event.href)

    async def on_key(self, key: str) -> bool:
        action = KEY_ACTIONS.get(key)
        if action == "next":
            return await self._engine.next_page()
        if action == "previous":
            return await self._engine.previous_page()
        if action == "first":
            return await self._engine.first_page()
        if action == "last":
            return await self._engine.last_page()
        return False

    def on_touch_start(self, x: float, y: float) -> None:
        self._touch_start = (x, y)

    async def on_touch_end(self, x: float, y: float) -> bool:
        if self._touch_start is None:
            return False

        start, self._touch_start = self._touch_start, None
        direction = swipe_direction(start, (x, y), self.min_swipe_distance)

        if direction == NEXT:
            return await self._engine.next_page()
        if direction == PREVIOUS:
            return await self._engine.previous_page()
        return False

    def on_transition_select(self, value: str) -> TransitionKind:
        return self._engine.set_transition_kind(value)
