"""
Database integration.

This module lazily builds the SQLAlchemy engine and session factory
from ``settings.database_url`` and provides:

* ``get_session`` – a context manager that commits on success and
  rolls back on any error;
* ``get_db`` – a generator wrapping ``get_session`` for dependency
  injection by an outer layer;
* ``init_db`` – creates all mapped tables if they do not exist.

SQLite does not enforce foreign keys unless asked to per connection,
so a ``connect`` listener turns ``PRAGMA foreign_keys`` on for SQLite
engines.  Without it ``ON DELETE SET NULL`` on transactions would be
silently ignored.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)

_ENGINE: Optional[Engine] = None
SessionLocal: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for ``url``, enabling FK enforcement on SQLite."""
    engine = create_engine(url, echo=echo, pool_pre_ping=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> Engine:
    global _ENGINE, SessionLocal
    if _ENGINE is None:
        _ENGINE = build_engine(settings.database_url, echo=settings.db_echo)
        SessionLocal = sessionmaker(bind=_ENGINE, autoflush=False, expire_on_commit=False)
        logger.info("Database engine created for %s", _ENGINE.url.render_as_string(hide_password=True))
    return _ENGINE


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session bound to the application engine.

    The session is committed when the block exits normally and rolled
    back if it raises; the exception is re-raised either way.
    """
    if SessionLocal is None:
        get_engine()

    assert SessionLocal is not None  # for type checkers
    session: Session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_db() -> Iterator[Session]:
    """Dependency-style wrapper around :func:`get_session`."""
    with get_session() as session:
        yield session


def init_db(engine: Optional[Engine] = None) -> None:
    """Create all tables declared on the ORM models."""
    from finance_tracker_api.app.models import Base

    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema is up to date")
