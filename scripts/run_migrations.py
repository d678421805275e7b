#!/usr/bin/env python3
"""Apply the stored identity schema with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from sociallogin.config import Settings
from sociallogin.util.logging import setup_logging
from sociallogin.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to revision and log any failure to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            alembic_cfg = Config("alembic.ini")
            alembic_cfg.set_main_option("sqlalchemy.url", settings.database.url)
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

        logfire.info("Database migrations completed", revision=revision)
        return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
