"""Application lifespan event handlers.

- Startup: configure logging, initialize the database engine, create tables
- Shutdown: dispose the database engine
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from app.core.config import Settings, get_settings
from app.database import create_tables, dispose_engine, init_engine
from app.observability.logging import get_logger, setup_logging


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


def _startup(settings: Settings) -> None:
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
        auth_mode=settings.auth.mode,
    )

    # Validate early so a typo in auth.mode fails startup, not the first request
    settings.auth_mode_enum  # noqa: B018

    engine = init_engine(settings)
    if settings.database.create_tables:
        create_tables(engine)

    logger.info("Application startup complete")


def _shutdown() -> None:
    logger.info("Shutting down application")
    dispose_engine()
    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Uses the settings stored on ``app.state`` by the factory.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    _startup(settings)
    try:
        yield
    finally:
        _shutdown()
