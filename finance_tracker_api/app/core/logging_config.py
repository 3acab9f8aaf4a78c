"""
Logging setup for the finance tracker.

``setup_logging`` attaches a console handler (and a file handler when
a log file is configured) to the root logger.  Level and file default
to ``settings.log_level`` and ``settings.log_file``.  SQLAlchemy's
own loggers are held at WARNING unless ``settings.db_echo`` is on, so
INFO output from the services is not drowned in pool chatter.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SQLALCHEMY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "sqlalchemy.orm")


def setup_logging(
    level: Optional[str] = None,
    logfile: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the root logger once and return it.

    A root logger that already has handlers is left untouched unless
    ``force`` is set, in which case existing handlers are closed and
    replaced.  Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers and not force:
        return root

    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    level_name = (level or settings.log_level).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    logfile = logfile or settings.log_file
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    sqlalchemy_level = logging.INFO if settings.db_echo else logging.WARNING
    for name in SQLALCHEMY_LOGGERS:
        logging.getLogger(name).setLevel(sqlalchemy_level)

    return root
