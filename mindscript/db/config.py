"""Database engine and per-request sessions for Mind-Script."""
import logging
from typing import Generator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from mindscript import config

logger = logging.getLogger(__name__)

DATABASE_URL = config.DATABASE_URL

if DATABASE_URL.startswith("sqlite"):
    logger.info("Using SQLite database: %s", DATABASE_URL)
else:
    logger.info("Using %s database", DATABASE_URL.split(":", 1)[0])


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement (ON DELETE CASCADE) for SQLite connections."""

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine, applying the SQLite specific connection settings."""
    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        engine = create_engine(database_url, echo=False, connect_args=connect_args, **kwargs)
        enable_sqlite_foreign_keys(engine)
        return engine
    return create_engine(database_url, echo=False, pool_pre_ping=True, **kwargs)


engine = build_engine(DATABASE_URL)


def get_session() -> Generator[Session, None, None]:
    """Dependency yielding a session scoped to a single request."""
    with Session(engine) as session:
        yield session
