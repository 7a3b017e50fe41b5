"""Database engine and session handling.

A single engine is built lazily from ``DB_URL`` (default: a
``resume_builder.db`` SQLite file at the project root). The users, templates
and resumes tables are created the first time the engine is requested, so
callers only need :func:`get_session`.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

DEFAULT_DB_FILENAME = "resume_builder.db"


class Base(DeclarativeBase):
    """Declarative base shared by users, templates and resumes."""


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_database_url() -> str:
    """Return ``DB_URL`` if set, else the URL of the local SQLite file."""
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url
    db_path = Path(__file__).resolve().parents[3] / DEFAULT_DB_FILENAME
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite only honours ON DELETE CASCADE / SET NULL with this pragma on.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(database_url: str) -> Engine:
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, future=True)

    # Request handlers run in a thread pool, so connections cross threads.
    engine = create_engine(
        database_url, future=True, connect_args={"check_same_thread": False}
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = _build_engine(get_database_url())
        # Registers every table on Base.metadata.
        from resume_builder.data.models import resume, template, user  # noqa: F401

        Base.metadata.create_all(bind=_engine)
    return _engine


def _get_session_factory() -> sessionmaker[Session]:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=_get_engine(), autoflush=False, expire_on_commit=False)
    return _SessionLocal


def init_db() -> None:
    """Create the engine and all tables now instead of on first use."""
    _get_engine()


def reset_engine() -> None:
    """Dispose the current engine so the next access re-reads ``DB_URL``."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
