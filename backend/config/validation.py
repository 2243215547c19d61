"""
Configuration Validation

Validation helpers shared by the configuration sections.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""

    def __init__(
        self, message: str, field: str | None = None, issues: list[str] | None = None
    ):
        super().__init__(message)
        self.field = field
        self.issues = issues or []


class ConfigValidator:
    """Configuration validation utilities."""

    @staticmethod
    def validate_port(port: int | str) -> bool:
        """
        Validate port number.

        Args:
            port: Port number to validate

        Returns:
            True if port is valid
        """
        try:
            port_int = int(port)
            return 1 <= port_int <= 65535
        except (ValueError, TypeError):
            return False

    @staticmethod
    def validate_positive_int(value: int | str, min_value: int = 1) -> bool:
        """
        Validate positive integer.

        Args:
            value: Value to validate
            min_value: Minimum allowed value

        Returns:
            True if value is valid positive integer
        """
        try:
            int_value = int(value)
            return int_value >= min_value
        except (ValueError, TypeError):
            return False

    @staticmethod
    def validate_directory(path: str) -> bool:
        """Check that a configured directory exists."""
        if not path:
            return False
        return Path(path).is_dir()
