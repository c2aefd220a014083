"""Declarative base shared by all ORM models."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Current UTC time, used for entity timestamps."""
    return datetime.now(UTC)


class BaseDatabaseModel(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    def __repr__(self) -> str:
        pk = getattr(self, "id", None)
        name = getattr(self, "name", None)
        return f"<{type(self).__name__} id={pk!r} name={name!r}>"


class TimestampMixin:
    """``created_at`` / ``updated_at`` columns maintained on insert and update."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
