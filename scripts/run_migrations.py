#!/usr/bin/env python3
"""Apply database migrations up to head."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from board.config import Settings
from board.util.observability import configure_logfire


def main() -> int:
    """Run migrations, reporting failures to Logfire before re-raising."""
    settings = Settings()
    configure_logfire(settings, service_name="board-migrations")

    try:
        logfire.info("Starting database migrations")
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed")
        return 0
    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # A half-migrated schema must not start serving
        raise


if __name__ == "__main__":
    sys.exit(main())
