"""Database engine and session management.

This module provides:
- Engine and session factory lifecycle (init on startup, dispose on shutdown)
- The ``get_db`` FastAPI dependency yielding one session per request
- Schema creation for development and tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database.models import BaseDatabaseModel
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlalchemy.engine import Engine

    from app.core.config import Settings

logger = get_logger(__name__)


class _EngineHolder:
    engine: Engine | None = None
    session_factory: sessionmaker[Session] | None = None


def build_engine(url: str, settings: Settings | None = None) -> Engine:
    """Create an engine for ``url``.

    SQLite URLs get ``check_same_thread`` disabled because sync route
    handlers run in FastAPI's threadpool; in-memory SQLite additionally
    shares one connection through ``StaticPool``.
    """
    echo = settings.database.echo if settings else False

    if url.startswith("sqlite"):
        kwargs: dict[str, object] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size if settings else 5,
        max_overflow=settings.database.max_overflow if settings else 10,
        pool_recycle=settings.database.pool_recycle if settings else 3600,
    )


def init_engine(settings: Settings) -> Engine:
    """Initialize the global engine and session factory.

    Should be called during application startup (lifespan).
    """
    engine = build_engine(settings.database_url, settings)
    _EngineHolder.engine = engine
    _EngineHolder.session_factory = sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
    logger.info(
        "Database engine initialized",
        dialect=engine.dialect.name,
        database=engine.url.database,
    )
    return engine


def get_engine() -> Engine:
    """Get the initialized engine.

    Raises:
        RuntimeError: If the engine is not initialized.
    """
    if _EngineHolder.engine is None:
        msg = "Database engine not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _EngineHolder.engine


def create_tables(engine: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    BaseDatabaseModel.metadata.create_all(engine or get_engine())
    logger.info("Database tables created")


def dispose_engine() -> None:
    """Dispose the engine and drop the session factory.

    Should be called during application shutdown (lifespan).
    """
    if _EngineHolder.engine is not None:
        _EngineHolder.engine.dispose()
        logger.info("Database engine disposed")
    _EngineHolder.engine = None
    _EngineHolder.session_factory = None


def get_db() -> Generator[Session]:
    """Yield a database session for FastAPI dependency injection.

    The session is closed after the request is handled.
    """
    if _EngineHolder.session_factory is None:
        msg = "Database engine not initialized. Call init_engine() first."
        raise RuntimeError(msg)

    db = _EngineHolder.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_database_health() -> str:
    """Return ``healthy``, ``unhealthy`` or ``not_initialized``."""
    if _EngineHolder.engine is None:
        return "not_initialized"
    try:
        with _EngineHolder.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database health check failed")
        return "unhealthy"
    return "healthy"
