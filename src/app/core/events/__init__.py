"""Application lifecycle events."""

from app.core.events.lifespan import lifespan


__all__ = ["lifespan"]
