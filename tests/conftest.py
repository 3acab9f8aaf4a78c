from __future__ import annotations

import pytest
from sqlalchemy.orm import sessionmaker

from finance_tracker_api.app.core.db import build_engine, init_db
from finance_tracker_api.app.models import User


@pytest.fixture()
def engine():
    eng = build_engine("sqlite+pysqlite:///:memory:")
    init_db(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture()
def session(engine):
    SessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def user(session):
    u = User(email="ana@example.com", password="secret")
    session.add(u)
    session.flush()
    return u


@pytest.fixture()
def other_user(session):
    u = User(email="luis@example.com", password="secret")
    session.add(u)
    session.flush()
    return u
