"""Database session management.

Provides a session factory for the SQLite response store, safe to share
across FastAPI's worker threads.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from tally.config import load_settings
from tally.db.schema import Base

logger = logging.getLogger(__name__)

# Engines and session factories, keyed by resolved database path
_engine_cache: dict[str, Engine] = {}
_session_factory_cache: dict[str, sessionmaker] = {}


def _resolve(db_path: Path | None) -> tuple[Path, str]:
    """Resolve db_path (or the configured default) and its cache key."""
    if db_path is None:
        db_path = load_settings().db_path

    db_path = Path(db_path)
    return db_path, str(db_path.resolve())


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the response store.

    Engines are cached per resolved path. Each session checks out its own
    pooled connection; check_same_thread=False lets FastAPI worker threads
    return connections they did not open.

    Args:
        db_path: Path to SQLite database file. Defaults to TALLY_DB_PATH.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    db_path, cache_key = _resolve(db_path)

    if cache_key in _engine_cache:
        return _engine_cache[cache_key]

    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    _engine_cache[cache_key] = engine
    logger.debug("Created engine for %s", db_path)

    return engine


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        SQLAlchemy Session instance.
    """
    _, cache_key = _resolve(db_path)

    factory = _session_factory_cache.get(cache_key)
    if factory is None:
        factory = sessionmaker(bind=get_engine(db_path))
        _session_factory_cache[cache_key] = factory

    return factory()


@contextmanager
def session_scope(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Context manager for scripts: commit on success, rollback on error.

    Request handlers use the FastAPI dependency in tally.api.app instead.

    Example:
        with session_scope(DEMO_DB_PATH) as session:
            submit_responses(session, submission_input)
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create the response store tables if they do not exist.

    Args:
        db_path: Path to SQLite database file.
    """
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
    logger.info("Response store ready at %s", engine.url.database)
