"""
Unified Configuration Management

Single source of truth for server, transition and logging settings, with
environment-specific defaults and validation.
"""

from .application_config import (
    ApplicationConfig,
    configure_logging,
    get_application_config,
    reset_configuration,
)
from .environment import Environment, get_current_environment
from .validation import ConfigValidationError

__all__ = [
    "ApplicationConfig",
    "configure_logging",
    "get_application_config",
    "reset_configuration",
    "Environment",
    "get_current_environment",
    "ConfigValidationError",
]
