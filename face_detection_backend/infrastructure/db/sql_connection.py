# Standard library imports
import asyncio
import logging
from typing import Callable, Optional, TypeVar

# External package imports
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Local application imports
from ...core.config import get_settings
from .orm_models import Base

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Global SQLAlchemy instances (singleton pattern)
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    SQLite connections are shared with worker threads (repository calls run
    via asyncio.to_thread) and get foreign key enforcement switched on.
    """
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine = create_engine(
                database_url, echo=echo, connect_args=connect_args, poolclass=StaticPool
            )
        else:
            engine = create_engine(database_url, echo=echo, connect_args=connect_args)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def get_engine() -> Engine:
    """
    Get SQLAlchemy engine instance (singleton pattern)

    Returns:
        Engine bound to DATABASE_URL
    """
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_db_engine(settings.database_url, echo=settings.database_echo)
    return _engine


def get_session_factory() -> sessionmaker:
    """
    Get the session factory bound to the global engine

    Returns:
        sessionmaker producing short-lived sessions
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(), autoflush=False, autocommit=False, expire_on_commit=False
        )
    return _session_factory


def init_db(engine: Optional[Engine] = None) -> None:
    """Create all tables that do not exist yet"""
    target = engine or get_engine()
    Base.metadata.create_all(bind=target)
    logger.info("Database tables ensured")


def dispose_engine() -> None:
    """Close pooled connections and forget the global engine"""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def check_connection(engine: Optional[Engine] = None) -> bool:
    """Run ``SELECT 1``; returns False instead of raising when the database is unreachable"""
    target = engine or get_engine()
    try:
        with target.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def run_in_session(session_factory: sessionmaker, work: Callable[[Session], T]) -> T:
    """
    Run ``work`` with a fresh session in a worker thread.

    The session is closed afterwards; ``work`` commits when it writes.
    """
    def _run() -> T:
        with session_factory() as session:
            return work(session)

    return await asyncio.to_thread(_run)
