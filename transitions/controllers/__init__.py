from .input_bindings import ClickEvent, InputBindings, swipe_direction
from .transition_engine import TransitionEngine

__all__ = ["ClickEvent", "InputBindings", "TransitionEngine", "swipe_direction"]
