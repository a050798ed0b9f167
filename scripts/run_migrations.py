#!/usr/bin/env python3
"""Move the database schema to a revision (``head`` by default).

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py ae1027a6   # upgrade to a revision
    python scripts/run_migrations.py --sql      # print the SQL instead
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import get_logger, setup_logging
from forum.util.observability import configure_logfire

PROJECT_ROOT = Path(__file__).resolve().parent.parent

logger = get_logger("forum.migrations")


def alembic_config() -> Config:
    """Alembic config rooted at the project, independent of the working directory."""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.attributes["configure_logger"] = False
    return config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--sql", action="store_true", help="emit SQL instead of applying it"
    )
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span(
        "run_migrations", revision=args.revision, environment=settings.environment
    ):
        try:
            command.upgrade(alembic_config(), args.revision, sql=args.sql)
        except Exception:
            # A failed upgrade must stop the deploy before the app starts
            logfire.exception("Database migration failed", revision=args.revision)
            raise

    logger.info("Schema upgraded to %s", args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
