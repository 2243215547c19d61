"""
Unified Application Configuration

Provides a centralized, type-safe configuration for the demo server and the
transition engine, built on top of the root ``config`` module defaults.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any

from config import (
    APP_NAME,
    APP_VERSION,
    LOGGING_CONFIG,
    SERVER_SETTINGS,
    TRANSITION_SETTINGS,
    Config,
)

from .environment import Environment, get_current_environment
from .validation import ConfigValidationError, ConfigValidator

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    """HTTP server settings."""

    host: str = SERVER_SETTINGS["host"]
    port: int = SERVER_SETTINGS["port"]
    static_dir: str = SERVER_SETTINGS["static_dir"]
    templates_dir: str = SERVER_SETTINGS["templates_dir"]

    def validate(self, environment: Environment) -> list[str]:
        """Validate server configuration."""
        issues = []

        if not ConfigValidator.validate_port(self.port):
            issues.append(f"Invalid port: {self.port}")

        if not ConfigValidator.validate_directory(self.static_dir):
            issues.append(f"Static directory not found: {self.static_dir}")

        if not ConfigValidator.validate_directory(self.templates_dir):
            issues.append(f"Templates directory required but not found: {self.templates_dir}")

        return issues


@dataclass
class TransitionConfig:
    """Settings shared by the transition engine and the page templates."""

    kinds: list[str] = field(default_factory=lambda: list(TRANSITION_SETTINGS["kinds"]))
    default_kind: str = TRANSITION_SETTINGS["default_kind"]
    animation_duration_ms: int = TRANSITION_SETTINGS["animation_duration_ms"]
    fetch_timeout: float = TRANSITION_SETTINGS["fetch_timeout"]
    min_swipe_distance: int = TRANSITION_SETTINGS["min_swipe_distance"]

    @property
    def animation_duration(self) -> float:
        """Animation duration in seconds."""
        return self.animation_duration_ms / 1000.0

    def validate(self, environment: Environment) -> list[str]:
        """Validate transition configuration."""
        issues = []

        if self.default_kind not in self.kinds:
            issues.append(f"Invalid default transition kind: {self.default_kind}")

        if not ConfigValidator.validate_positive_int(self.animation_duration_ms):
            issues.append("Animation duration must be positive")

        if self.fetch_timeout <= 0:
            issues.append("Fetch timeout must be positive")

        if self.animation_duration_ms > 5000:
            issues.append("Animation duration seems too long")

        return issues


@dataclass
class LoggingConfig:
    """Logging configuration settings."""

    level: str = LOGGING_CONFIG["level"]
    format: str = LOGGING_CONFIG["format"]
    file_path: str | None = None

    def validate(self, environment: Environment) -> list[str]:
        """Validate logging configuration."""
        issues = []

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level.upper() not in valid_levels:
            issues.append(f"Invalid logging level: {self.level}")

        if environment.is_production() and self.level.upper() == "DEBUG":
            issues.append("Debug logging should not be used in production")

        return issues


@dataclass
class ApplicationConfig:
    """
    Unified application configuration.

    Centralizes server, transition and logging settings in a single,
    type-safe object.
    """

    environment: Environment
    server: ServerConfig = field(default_factory=ServerConfig)
    transitions: TransitionConfig = field(default_factory=TransitionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    debug: bool = False

    @classmethod
    def from_environment(cls) -> "ApplicationConfig":
        """Create configuration from environment variables."""
        config = cls(environment=get_current_environment())

        config._load_server_config()
        config._load_transition_config()
        config._load_logging_config()
        config._load_app_config()

        return config

    def _load_server_config(self) -> None:
        """Load server configuration from environment."""
        self.server = ServerConfig(
            host=Config.get_host(),
            port=Config.get_port(),
            static_dir=os.getenv("STATIC_DIR", SERVER_SETTINGS["static_dir"]),
            templates_dir=os.getenv("TEMPLATES_DIR", SERVER_SETTINGS["templates_dir"]),
        )

    def _load_transition_config(self) -> None:
        """Load transition configuration from environment."""
        self.transitions = TransitionConfig(
            default_kind=Config.get_transition_kind(),
            animation_duration_ms=Config.get_animation_duration_ms(),
            fetch_timeout=Config.get_fetch_timeout(),
            min_swipe_distance=int(
                os.getenv("MIN_SWIPE_DISTANCE", str(TRANSITION_SETTINGS["min_swipe_distance"]))
            ),
        )

    def _load_logging_config(self) -> None:
        """Load logging configuration from environment."""
        level = "DEBUG" if self.environment.is_development() else "INFO"
        if self.environment.is_testing():
            level = "WARNING"

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", level),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

    def _load_app_config(self) -> None:
        """Load application-specific configuration."""
        self.debug = os.getenv("DEBUG", "false").lower() == "true"

    def validate(self) -> None:
        """
        Validate entire configuration and raise errors for critical issues.

        Raises:
            ConfigValidationError: If critical configuration issues are found
        """
        all_issues = []

        for config_name, config_obj in [
            ("server", self.server),
            ("transitions", self.transitions),
            ("logging", self.logging),
        ]:
            for issue in config_obj.validate(self.environment):
                all_issues.append(f"{config_name}: {issue}")

        for issue in all_issues:
            logger.warning(f"Configuration issue: {issue}")

        critical_keywords = ["must", "required", "invalid"]
        critical_issues = [
            issue
            for issue in all_issues
            if any(keyword in issue.lower() for keyword in critical_keywords)
        ]

        if critical_issues and self.environment.requires_strict_validation():
            raise ConfigValidationError(
                "Critical configuration issues found", issues=critical_issues
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "environment": self.environment.value,
            "server": {
                "host": self.server.host,
                "port": self.server.port,
            },
            "transitions": {
                "kinds": self.transitions.kinds,
                "default_kind": self.transitions.default_kind,
                "animation_duration_ms": self.transitions.animation_duration_ms,
                "fetch_timeout": self.transitions.fetch_timeout,
            },
            "app": {
                "name": self.app_name,
                "version": self.app_version,
                "debug": self.debug,
            },
        }


# Global configuration instance
_config: ApplicationConfig | None = None


def get_application_config(reload: bool = False) -> ApplicationConfig:
    """
    Get the global application configuration instance.

    Args:
        reload: If True, reload configuration from environment

    Returns:
        ApplicationConfig instance
    """
    global _config

    if _config is None or reload:
        _config = ApplicationConfig.from_environment()
        _config.validate()
        logger.info(f"Configuration loaded for {_config.environment.value} environment")

    return _config


def configure_logging(config: ApplicationConfig | None = None) -> None:
    """
    Configure logging based on application configuration.

    Args:
        config: Optional configuration instance
    """
    if config is None:
        config = get_application_config()

    log_config = config.logging

    logging.basicConfig(
        level=getattr(logging, log_config.level.upper()),
        format=log_config.format,
        filename=log_config.file_path,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.info(
        f"Logging configured: level={log_config.level}, file={log_config.file_path}"
    )


def reset_configuration() -> None:
    """Reset global configuration (useful for testing)."""
    global _config
    _config = None
