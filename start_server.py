#!/usr/bin/env python3
"""
Demo site server starter.
"""

import logging
import sys

from backend.config import configure_logging, get_application_config

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the demo site on the configured host and port."""
    try:
        import uvicorn

        config = get_application_config()
        configure_logging(config)

        from backend.api.main import create_app

        app = create_app(config)

        logger.info(
            f"Server running on http://localhost:{config.server.port} "
            f"(bound to {config.server.host})"
        )

        uvicorn.run(
            app,
            host=config.server.host,
            port=config.server.port,
            log_level=config.logging.level.lower(),
            access_log=False,
            reload=False,
            loop="asyncio",
            use_colors=False
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
        sys.exit(0)
