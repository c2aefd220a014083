"""Ingredient model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database.models.base import BaseDatabaseModel, TimestampMixin
from app.database.models.recipe import recipe_ingredient


if TYPE_CHECKING:
    from app.database.models.recipe import Recipe


class Ingredient(TimestampMixin, BaseDatabaseModel):
    """SQLAlchemy ORM model for the 'ingredients' table."""

    __tablename__ = "ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    recipes: Mapped[list[Recipe]] = relationship(
        secondary=recipe_ingredient,
        back_populates="ingredients",
    )
