"""Recipe model and the recipe/ingredient association table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database.models.base import BaseDatabaseModel, TimestampMixin


if TYPE_CHECKING:
    from app.database.models.ingredient import Ingredient


recipe_ingredient = Table(
    "recipe_ingredient",
    BaseDatabaseModel.metadata,
    Column(
        "recipe_id",
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "ingredient_id",
        Integer,
        ForeignKey("ingredients.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Recipe(TimestampMixin, BaseDatabaseModel):
    """SQLAlchemy ORM model for the 'recipes' table."""

    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    number_of_servings: Mapped[int] = mapped_column(Integer, nullable=False)
    instructions: Mapped[str] = mapped_column(Text, nullable=False)

    ingredients: Mapped[list[Ingredient]] = relationship(
        secondary=recipe_ingredient,
        back_populates="recipes",
        lazy="selectin",
        order_by="Ingredient.id",
    )
