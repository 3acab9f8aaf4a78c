#!/usr/bin/env python3
"""
Create the Finance Tracker tables in a database.

Usage:
    python init_db.py --database-url sqlite:///./finance_tracker.db

If --database-url is omitted, ``DATABASE_URL`` (or the built-in
default) from the application settings is used.
"""

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from finance_tracker_api.app.core.config import settings
from finance_tracker_api.app.core.db import build_engine, init_db
from finance_tracker_api.app.core.logging_config import setup_logging


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Create Finance Tracker tables.")
    ap.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy database URL")
    ap.add_argument("--log-level", default=settings.log_level, help="Logging level (DEBUG, INFO, ...)")
    ap.add_argument("--echo", action="store_true", help="Log every SQL statement")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger("init_db")

    engine = build_engine(args.database_url, echo=args.echo)
    try:
        init_db(engine)
    except SQLAlchemyError:
        logger.exception("Failed to initialise database %s", args.database_url)
        return 1
    finally:
        engine.dispose()

    logger.info("Tables created in %s", engine.url.render_as_string(hide_password=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
