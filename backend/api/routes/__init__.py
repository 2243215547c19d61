"""Route modules for the demo site."""

from backend.api.routes import fragments, pages

__all__ = ["fragments", "pages"]
