#!/usr/bin/env python3
"""Start the blog API, reporting startup failures to Logfire."""

import sys
import logfire
import uvicorn

from blog.config import Settings
from blog.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then serve the API with uvicorn."""
    settings = Settings()

    # Configure Logfire before the app module is imported by uvicorn
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting blog API", environment=settings.environment, port=settings.port
        )

        uvicorn.run(
            "blog.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Blog API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
