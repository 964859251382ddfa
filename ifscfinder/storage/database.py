"""
Database connection management for the bundled IFSC dataset.

The dataset is a SQLite file that never changes at runtime, so it is opened
read-only through a URI filename. With ``immutable=1`` SQLite skips locking
entirely, which lets any number of readers share the file.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator
from urllib.parse import quote

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Connection, Engine

from ifscfinder.core.config import get_settings

logger = logging.getLogger(__name__)

# Global engine instance
_engine: Engine | None = None
_DB_PATH: Path | None = None


def get_db_path() -> Path:
    """Get the dataset path.

    Resolution order: explicit ``set_db_path``, then ``IFSCFINDER_DB_PATH``,
    then the bundled ``ifscfinder/data/ifsc.db``.
    """
    global _DB_PATH
    if _DB_PATH is None:
        configured = get_settings().db_path
        if configured:
            _DB_PATH = Path(configured)
        else:
            # storage/database.py -> ifscfinder/ -> data/
            _DB_PATH = Path(__file__).parent.parent / "data" / "ifsc.db"
    return _DB_PATH


def set_db_path(path: Path | str) -> None:
    """Set a custom dataset path (useful for testing)."""
    global _DB_PATH
    reset_engine()  # Drop connections to the previous file
    _DB_PATH = Path(path)


def get_database_url() -> URL:
    """Build a read-only SQLite URI for the dataset.

    The path is percent-encoded for SQLite's URI parser and the URL is
    built as an object, since a URL string would be unquoted once more
    by SQLAlchemy before reaching the driver.
    """
    settings = get_settings()
    db_path = get_db_path().resolve()
    query = {"mode": "ro", "uri": "true"}
    if settings.immutable:
        query["immutable"] = "1"
    return URL.create(
        "sqlite",
        database=f"file:{quote(db_path.as_posix())}",
        query=query,
    )


def _configure_connection(dbapi_connection, connection_record) -> None:
    """Apply per-connection pragmas for a read-only workload."""
    cache_size = int(get_settings().sqlite_cache_size)
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA query_only = ON")
        cursor.execute("PRAGMA synchronous = NORMAL")
        cursor.execute(f"PRAGMA cache_size = {cache_size}")
    finally:
        cursor.close()


def get_engine() -> Engine:
    """Get SQLAlchemy engine for dataset queries.

    The engine is created lazily; opening the file is deferred until the
    first connection is checked out.
    """
    global _engine
    if _engine is None:
        database_url = get_database_url()
        _engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
        event.listen(_engine, "connect", _configure_connection)
        logger.info("Opened IFSC dataset engine for %s", get_db_path())
    return _engine


def reset_engine() -> None:
    """Dispose the engine, closing pooled connections, and drop it."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
        logger.info("Closed IFSC dataset engine")


def reset_db_path() -> None:
    """Forget any custom dataset path and close the engine."""
    global _DB_PATH
    reset_engine()
    _DB_PATH = None


@contextmanager
def get_db() -> Generator[Connection, None, None]:
    """Get a read-only dataset connection.

    Usage:
        with get_db() as conn:
            row = conn.execute(text("SELECT * FROM ifsc_codes")).first()
    """
    engine = get_engine()
    with engine.connect() as conn:
        yield conn
