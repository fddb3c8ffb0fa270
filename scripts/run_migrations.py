#!/usr/bin/env python3
"""Apply Alembic migrations for the blog schema, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from blog.config import Settings
from blog.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision`` (default: latest)."""
    settings = Settings()
    configure_logfire(settings)

    try:
        with logfire.span("run_migrations", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container doesn't start with a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
