"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn app.main:app --reload

    # Or directly
    python -m app.main
"""

from app.factory import create_app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    from app.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )
