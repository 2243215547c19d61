"""
Application Configuration

This file contains the configuration settings for the Smooth Transitions demo site.
It follows a modular approach to keep settings organized and easy to manage.
"""

import os

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

# --- Application Metadata ---
APP_NAME = "Smooth Transitions"
APP_VERSION = "1.0.0"

# --- Page Set ---
# Ordered page definitions. The order defines the page index used by the
# transition engine, indicators and navigation links.
PAGES = [
    {"id": "welcome", "route": "/", "title": "Welcome - Smooth Transitions", "label": "Welcome"},
    {"id": "animations", "route": "/animations", "title": "Smooth Animations", "label": "Animations"},
    {"id": "effects", "route": "/effects", "title": "Multiple Effects", "label": "Effects"},
    {"id": "interaction", "route": "/interaction", "title": "Touch & Click", "label": "Interaction"},
    {"id": "ready", "route": "/ready", "title": "Ready to Use", "label": "Ready"},
]

# --- Transition Configuration ---
# The animation duration is shared by the engine (fallback wait) and the
# stylesheet (exported as a CSS custom property), so both always agree.
TRANSITION_SETTINGS = {
    "kinds": ["slide", "fade", "zoom", "rotate", "flip", "cube"],
    "default_kind": "slide",
    "animation_duration_ms": 600,
    # Upper bound on a single fragment fetch, in seconds.
    "fetch_timeout": 10.0,
    # Minimum horizontal displacement for a swipe to count as navigation.
    "min_swipe_distance": 50,
}

# --- Server Configuration ---
SERVER_SETTINGS = {
    "host": "0.0.0.0",
    "port": 3000,
    "static_dir": os.path.join(os.path.dirname(os.path.abspath(__file__)), "backend", "static"),
    "templates_dir": os.path.join(os.path.dirname(os.path.abspath(__file__)), "backend", "templates"),
}

# --- Logging Configuration ---
LOGGING_CONFIG = {
    "level": "INFO",  # Logging level, e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class Config:
    @staticmethod
    def get_port() -> int:
        """
        Get the listening port.

        The PORT environment variable (or .env entry) wins over the default.
        """
        env_port = os.getenv("PORT")
        if env_port and env_port.strip():
            try:
                return int(env_port.strip())
            except ValueError:
                pass  # fall back to the default below
        return SERVER_SETTINGS["port"]

    @staticmethod
    def get_host() -> str:
        """Get the bind address."""
        return os.getenv("HOST", "").strip() or SERVER_SETTINGS["host"]

    @staticmethod
    def get_transition_kind() -> str:
        """Get the default transition kind, falling back to slide for unknown values."""
        kind = os.getenv("TRANSITION_KIND", "").strip().lower()
        if kind in TRANSITION_SETTINGS["kinds"]:
            return kind
        return TRANSITION_SETTINGS["default_kind"]

    @staticmethod
    def get_animation_duration_ms() -> int:
        """Get the shared animation duration in milliseconds."""
        value = os.getenv("ANIMATION_DURATION_MS", "").strip()
        if value.isdigit():
            return int(value)
        return TRANSITION_SETTINGS["animation_duration_ms"]

    @staticmethod
    def get_fetch_timeout() -> float:
        """Get the fragment fetch timeout in seconds."""
        value = os.getenv("FETCH_TIMEOUT", "").strip()
        try:
            return float(value) if value else TRANSITION_SETTINGS["fetch_timeout"]
        except ValueError:
            return TRANSITION_SETTINGS["fetch_timeout"]
