#!/usr/bin/env python3
"""Upgrade the Memora database schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f7a9d2b64
"""

import sys
import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from memora.config import Settings
from memora.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision (head by default)."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    database = make_url(settings.database_url)

    with logfire.span(
        "migrations.upgrade",
        target=target,
        host=database.host,
        database=database.database,
    ):
        try:
            # env.py reads the database URL from Settings
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

        logfire.info("Database migrations completed", target=target)
        return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
