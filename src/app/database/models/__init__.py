"""ORM models."""

from app.database.models.base import BaseDatabaseModel, TimestampMixin, utcnow
from app.database.models.ingredient import Ingredient
from app.database.models.recipe import Recipe, recipe_ingredient


__all__ = [
    "BaseDatabaseModel",
    "Ingredient",
    "Recipe",
    "TimestampMixin",
    "recipe_ingredient",
    "utcnow",
]
