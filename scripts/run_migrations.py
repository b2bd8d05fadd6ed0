#!/usr/bin/env python3
"""Apply the message store schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c5d1e7a9b20
    python scripts/run_migrations.py --sql      # print SQL instead of applying it
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from chat.config import Settings
from chat.util.logging import setup_logging
from chat.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Migrate the messages database")
    parser.add_argument(
        "revision", nargs="?", default="head", help="Target revision (default: head)"
    )
    parser.add_argument(
        "--sql", action="store_true", help="Emit SQL to stdout without connecting"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Upgrade the messages schema, reporting failures to Logfire."""
    args = parse_args(argv)
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    # Never log credentials
    database = make_url(settings.database_url).render_as_string(hide_password=True)

    with logfire.span(
        "migrations.upgrade",
        revision=args.revision,
        offline=args.sql,
        database=database,
        environment=settings.environment,
    ):
        try:
            alembic_cfg = Config(ALEMBIC_INI)
            command.upgrade(alembic_cfg, args.revision, sql=args.sql)

            logfire.info(
                "Messages schema migrated",
                revision=args.revision,
                database=database,
            )
            return 0

        except Exception as e:
            logfire.error(
                "Messages schema migration failed",
                revision=args.revision,
                database=database,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the deployment stops before the app starts on a stale schema
            raise


if __name__ == "__main__":
    sys.exit(main())
