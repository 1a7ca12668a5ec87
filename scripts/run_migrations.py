#!/usr/bin/env python3
"""Apply database migrations before the API starts.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c2a9d7b40
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from asklet.config import Settings
from asklet.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "migrations"))

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(config, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a stale schema
            raise
    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
