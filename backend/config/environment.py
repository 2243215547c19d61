"""
Environment Detection

Provides environment detection shared by the server configuration modules.
"""

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, env_str: str) -> 'Environment':
        """Convert string to Environment enum, defaulting to development."""
        if not env_str:
            return cls.DEVELOPMENT

        env_mapping = {
            "dev": cls.DEVELOPMENT,
            "development": cls.DEVELOPMENT,
            "test": cls.TESTING,
            "testing": cls.TESTING,
            "prod": cls.PRODUCTION,
            "production": cls.PRODUCTION,
        }

        return env_mapping.get(env_str.lower().strip(), cls.DEVELOPMENT)

    def is_production(self) -> bool:
        return self == self.PRODUCTION

    def is_development(self) -> bool:
        return self == self.DEVELOPMENT

    def is_testing(self) -> bool:
        return self == self.TESTING

    def requires_strict_validation(self) -> bool:
        """Configuration problems are fatal only in production."""
        return self == self.PRODUCTION


def get_current_environment() -> Environment:
    """
    Detect current environment from the process environment.

    Checks ENVIRONMENT, then ENV, then NODE_ENV (the variable the demo site's
    deployment scripts historically set). CI runs default to testing.

    Returns:
        Environment enum value
    """
    for env_var in ["ENVIRONMENT", "ENV", "NODE_ENV"]:
        env_value = os.getenv(env_var)
        if env_value:
            environment = Environment.from_string(env_value)
            logger.debug(f"Environment detected from {env_var}: {environment.value}")
            return environment

    if any(os.getenv(ci_var) for ci_var in ["CI", "GITHUB_ACTIONS"]):
        logger.debug("Environment detected from CI variables: testing")
        return Environment.TESTING

    logger.debug("Environment defaulted to: development")
    return Environment.DEVELOPMENT
