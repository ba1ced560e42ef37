#!/usr/bin/env python3
"""Start the API server, reporting startup failures to Logfire."""

import sys
import logfire
import uvicorn

from hub.config import Settings
from hub.util.logging import setup_logging
from hub.util.observability import configure_logfire


def main() -> int:
    """Configure logging and observability, then serve the API."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire before the app module is imported
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting API server",
            host=settings.host,
            port=settings.port,
            persistence=settings.persistence.backend,
        )

        uvicorn.run(
            "hub.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
